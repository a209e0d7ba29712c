"""Doubly linked lists: building, inserting before a position, deleting and reversing.

Every function takes the head node, or None for an empty list. Functions that
may change the first node return the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "DNode",
    "from_list",
    "to_list",
    "delete_head",
    "delete_tail",
    "delete_at",
    "delete_node",
    "insert_before_head",
    "insert_before_tail",
    "insert_before_kth",
    "insert_before_node",
    "reverse",
]


@dataclass(eq=False, repr=False)
class DNode:
    """A node holding a value and links to the next and previous nodes."""

    val: Any = 0
    next: Optional[DNode] = None
    back: Optional[DNode] = None

    def __repr__(self) -> str:
        return f"DNode({self.val!r})"


def _nodes(head: DNode | None) -> Iterator[DNode]:
    while head is not None:
        yield head
        head = head.next


def _tail(head: DNode) -> DNode:
    node = head
    while node.next is not None:
        node = node.next
    return node


def _node_at(head: DNode | None, k: int) -> DNode:
    for position, node in enumerate(_nodes(head), start=1):
        if position == k:
            return node
    raise IndexError(f"position {k} is outside the list")


def from_list(values: Iterable) -> DNode | None:
    """Build a list holding ``values`` in order; None if there are none."""
    head = previous = None
    for value in values:
        node = DNode(value, None, previous)
        if previous is None:
            head = node
        else:
            previous.next = node
        previous = node
    return head


def to_list(head: DNode | None) -> list:
    """Return the values of the list from head to tail."""
    return [node.val for node in _nodes(head)]


def delete_head(head: DNode | None) -> DNode | None:
    """Drop the first node and return the new head."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.back = None
    head.next = None
    return new_head


def delete_tail(head: DNode | None) -> DNode | None:
    """Drop the last node."""
    if head is None or head.next is None:
        return None
    tail = _tail(head)
    tail.back.next = None
    tail.back = None
    return head


def delete_at(head: DNode | None, k: int) -> DNode | None:
    """Drop the ``k``-th node (1-based); raise IndexError if there is none."""
    if head is None:
        return None
    node = _node_at(head, k)
    if node.back is None and node.next is None:
        return None
    if node.back is None:
        return delete_head(head)
    if node.next is None:
        return delete_tail(head)
    node.back.next = node.next
    node.next.back = node.back
    node.next = node.back = None
    return head


def delete_node(node: DNode) -> None:
    """Unlink ``node`` from its list; it must not be the head."""
    previous = node.back
    if previous is None:
        raise ValueError("cannot delete the head node in place")
    following = node.next
    previous.next = following
    if following is not None:
        following.back = previous
    node.next = node.back = None


def insert_before_head(head: DNode | None, value) -> DNode:
    """Put ``value`` in front of the list and return the new head."""
    new_head = DNode(value, head, None)
    if head is not None:
        head.back = new_head
    return new_head


def insert_before_tail(head: DNode | None, value) -> DNode:
    """Insert ``value`` just before the last node."""
    if head is None:
        raise ValueError("an empty list has no tail")
    if head.next is None:
        return insert_before_head(head, value)
    tail = _tail(head)
    insert_before_node(tail, value)
    return head


def insert_before_kth(head: DNode | None, value, k: int) -> DNode:
    """Insert ``value`` before the ``k``-th node (1-based).

    Raises IndexError if the list has no ``k``-th node.
    """
    if k == 1:
        return insert_before_head(head, value)
    node = _node_at(head, k)
    insert_before_node(node, value)
    return head


def insert_before_node(node: DNode, value) -> None:
    """Insert ``value`` just before ``node``; it must not be the head."""
    previous = node.back
    if previous is None:
        raise ValueError("cannot insert before the head node in place")
    new_node = DNode(value, node, previous)
    previous.next = new_node
    node.back = new_node


def reverse(head: DNode | None) -> DNode | None:
    """Reverse the list in place by swapping each node's links."""
    previous = None
    current = head
    while current is not None:
        current.next, current.back = current.back, current.next
        previous = current
        current = current.back
    return previous