import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.doubly_linked import (
    DNode,
    delete_at,
    delete_head,
    delete_node,
    delete_tail,
    from_list,
    insert_before_head,
    insert_before_kth,
    insert_before_node,
    insert_before_tail,
    reverse,
    to_list,
)

int_lists = st.lists(st.integers(-50, 50), max_size=20)
non_empty = st.lists(st.integers(-50, 50), min_size=1, max_size=20)


def _backward(head):
    """Values read from the tail back to the head, following back links."""
    if head is None:
        return []
    node = head
    while node.next is not None:
        node = node.next
    values = []
    while node is not None:
        values.append(node.val)
        node = node.back
    return values


def _assert_consistent(head):
    if head is not None:
        assert head.back is None
    assert _backward(head) == list(reversed(to_list(head)))


@given(int_lists)
def test_round_trip(values):
    head = from_list(values)
    assert to_list(head) == values
    _assert_consistent(head)


def test_empty_list_is_none():
    assert from_list([]) is None
    assert to_list(None) == []


@given(non_empty)
def test_delete_head(values):
    head = delete_head(from_list(values))
    assert to_list(head) == values[1:]
    _assert_consistent(head)


@given(non_empty)
def test_delete_tail(values):
    head = delete_tail(from_list(values))
    assert to_list(head) == values[:-1]
    _assert_consistent(head)


def test_delete_on_empty():
    assert delete_head(None) is None
    assert delete_tail(None) is None
    assert delete_at(None, 1) is None


@given(st.data())
def test_delete_at(data):
    values = data.draw(non_empty)
    k = data.draw(st.integers(1, len(values)))
    head = delete_at(from_list(values), k)
    assert to_list(head) == values[: k - 1] + values[k:]
    _assert_consistent(head)


@pytest.mark.parametrize("k", [0, 4, 10])
def test_delete_at_out_of_range(k):
    with pytest.raises(IndexError):
        delete_at(from_list([1, 2, 3]), k)


def test_delete_node_middle_and_tail():
    head = from_list([1, 2, 3, 4])
    delete_node(head.next)
    assert to_list(head) == [1, 3, 4]
    delete_node(head.next.next)
    assert to_list(head) == [1, 3]
    _assert_consistent(head)


def test_delete_node_rejects_head():
    head = from_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head)


def test_deletion_walkthrough():
    values = [5, 3, 4, 6, 7, 5, 7, 9, 23, 6]
    head = from_list(values)
    head = delete_head(head)
    head = delete_tail(head)
    head = delete_at(head, 2)
    delete_node(head.next.next)
    assert to_list(head) == [3, 6, 5, 7, 9, 23]
    _assert_consistent(head)


@given(int_lists, st.integers())
def test_insert_before_head(values, value):
    head = insert_before_head(from_list(values), value)
    assert to_list(head) == [value] + values
    _assert_consistent(head)


@given(non_empty, st.integers())
def test_insert_before_tail(values, value):
    head = insert_before_tail(from_list(values), value)
    if len(values) == 1:
        assert to_list(head) == [value] + values
    else:
        assert to_list(head) == values[:-1] + [value, values[-1]]
    _assert_consistent(head)


def test_insert_before_tail_empty():
    with pytest.raises(ValueError):
        insert_before_tail(None, 1)


@given(st.data())
def test_insert_before_kth(data):
    values = data.draw(non_empty)
    k = data.draw(st.integers(1, len(values)))
    head = insert_before_kth(from_list(values), 99, k)
    assert to_list(head) == values[: k - 1] + [99] + values[k - 1 :]
    _assert_consistent(head)


@pytest.mark.parametrize("k", [0, 4, 7])
def test_insert_before_kth_out_of_range(k):
    with pytest.raises(IndexError):
        insert_before_kth(from_list([1, 2, 3]), 9, k)


def test_insert_before_node_rejects_head():
    head = from_list([1])
    with pytest.raises(ValueError):
        insert_before_node(head, 0)


def test_insertion_walkthrough():
    head = from_list([5, 3, 4, 6, 7])
    head = insert_before_head(head, 12)
    head = insert_before_tail(head, 16)
    head = insert_before_kth(head, 17, 3)
    insert_before_node(head.next, 18)
    assert to_list(head) == [12, 18, 5, 17, 3, 4, 6, 16, 7]
    _assert_consistent(head)


@given(int_lists)
def test_reverse(values):
    head = reverse(from_list(values))
    assert to_list(head) == list(reversed(values))
    _assert_consistent(head)


@given(int_lists)
def test_reverse_twice_is_identity(values):
    assert to_list(reverse(reverse(from_list(values)))) == values


def test_reverse_single_node_returns_same_node():
    node = DNode(4)
    assert reverse(node) is node
    assert reverse(None) is None