"""Sentence splitting."""

from __future__ import annotations

__all__ = ["split_sentence"]


def split_sentence(sentence: str) -> list[str]:
    """Split on single spaces, keeping empty fields except a trailing one."""
    parts = sentence.split(" ")
    if parts[-1] == "":
        parts.pop()
    return parts