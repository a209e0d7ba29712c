"""A prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Trie"]


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words supporting prefix queries."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, text: str) -> _Node | None:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.terminal = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted and not removed."""
        node = self._walk(word)
        return node is not None and node.terminal

    def starts_with(self, prefix: str) -> bool:
        """Return True if some path in the trie spells ``prefix``."""
        return self._walk(prefix) is not None

    def remove(self, word: str) -> None:
        """Unmark ``word``; nodes are kept, so prefixes still match."""
        node = self._walk(word)
        if node is not None:
            node.terminal = False