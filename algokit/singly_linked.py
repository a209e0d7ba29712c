"""Singly linked lists: building, inserting, deleting, merging, sorting and cycle checks.

Every function takes the head node, or None for an empty list. Functions that
may change the first node return the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "ListNode",
    "from_list",
    "to_list",
    "length",
    "contains",
    "insert_head",
    "insert_tail",
    "insert_at",
    "insert_before_value",
    "remove_head",
    "remove_tail",
    "remove_at",
    "remove_value",
    "merge_sorted",
    "reverse",
    "sort_list",
    "middle_node",
    "has_cycle",
    "loop_length",
]


@dataclass(eq=False, repr=False)
class ListNode:
    """A node holding a value and a link to the next node."""

    val: Any = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def from_list(values: Iterable) -> ListNode | None:
    """Build a list holding ``values`` in order; None if there are none."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list:
    """Return the values of the list in order."""
    return [node.val for node in _nodes(head)]


def length(head: ListNode | None) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _nodes(head))


def contains(head: ListNode | None, value) -> bool:
    """Return True if some node holds ``value``."""
    return any(node.val == value for node in _nodes(head))


def insert_head(head: ListNode | None, value) -> ListNode:
    """Put ``value`` in front of the list."""
    return ListNode(value, head)


def insert_tail(head: ListNode | None, value) -> ListNode:
    """Append ``value`` after the last node."""
    new_node = ListNode(value)
    if head is None:
        return new_node
    last = head
    while last.next is not None:
        last = last.next
    last.next = new_node
    return head


def insert_at(head: ListNode | None, value, k: int) -> ListNode | None:
    """Insert ``value`` so that it becomes the ``k``-th node (1-based).

    A position beyond one past the end leaves the list unchanged.
    """
    if k == 1:
        return ListNode(value, head)
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            node.next = ListNode(value, node.next)
            break
    return head


def insert_before_value(head: ListNode | None, value, target) -> ListNode | None:
    """Insert ``value`` before the first node holding ``target``, if any."""
    if head is None:
        return None
    if head.val == target:
        return ListNode(value, head)
    node = head
    while node.next is not None:
        if node.next.val == target:
            node.next = ListNode(value, node.next)
            break
        node = node.next
    return head


def remove_head(head: ListNode | None) -> ListNode | None:
    """Drop the first node."""
    if head is None:
        return None
    return head.next


def remove_tail(head: ListNode | None) -> ListNode | None:
    """Drop the last node."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def remove_at(head: ListNode | None, k: int) -> ListNode | None:
    """Drop the ``k``-th node (1-based); an out-of-range ``k`` changes nothing."""
    if head is None:
        return None
    if k == 1:
        return head.next
    previous = None
    for position, node in enumerate(_nodes(head), start=1):
        if position == k:
            previous.next = node.next
            break
        previous = node
    return head


def remove_value(head: ListNode | None, value) -> ListNode | None:
    """Drop the first node holding ``value``, if any."""
    if head is None:
        return None
    if head.val == value:
        return head.next
    previous = head
    while previous.next is not None:
        if previous.next.val == value:
            previous.next = previous.next.next
            break
        previous = previous.next
    return head


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``second`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the links in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def _first_middle(head: ListNode) -> ListNode:
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort, reusing its nodes."""
    if head is None or head.next is None:
        return head
    middle = _first_middle(head)
    right = middle.next
    middle.next = None
    return merge_sorted(sort_list(head), sort_list(right))


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _meeting_point(head: ListNode | None) -> ListNode | None:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following the links never reaches the end."""
    return _meeting_point(head) is not None


def loop_length(head: ListNode | None) -> int:
    """Return the number of nodes in the cycle, or 0 if there is none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return 0
    count = 1
    node = meeting.next
    while node is not meeting:
        count += 1
        node = node.next
    return count