"""Subsets, subsequences and unique permutations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = [
    "subsets",
    "subsequences",
    "permute_unique",
    "subsequences_with_sum",
    "first_subsequence_with_sum",
    "count_subsequences_with_sum",
]


def subsets(nums: Sequence) -> list[list]:
    """Return the power set, one subset per bitmask from 0 to 2**n - 1."""
    return [
        [value for i, value in enumerate(nums) if mask & (1 << i)]
        for mask in range(1 << len(nums))
    ]


def subsequences(items: Sequence) -> Iterator[list]:
    """Yield every subsequence, choosing to take each item before skipping it."""
    chosen: list = []

    def walk(index: int) -> Iterator[list]:
        if index == len(items):
            yield list(chosen)
            return
        chosen.append(items[index])
        yield from walk(index + 1)
        chosen.pop()
        yield from walk(index + 1)

    yield from walk(0)


def permute_unique(nums: Sequence) -> list[list]:
    """Return every distinct permutation of ``nums``, duplicates included only once."""
    result: list[list] = []

    def walk(index: int, values: list) -> None:
        if index == len(values):
            result.append(values)
            return
        for i in range(index, len(values)):
            if i != index and values[i] == values[index]:
                continue
            values[i], values[index] = values[index], values[i]
            walk(index + 1, list(values))

    walk(0, sorted(nums))
    return result


def subsequences_with_sum(items: Sequence[int], k: int) -> Iterator[list[int]]:
    """Yield every subsequence whose elements add up to ``k``."""
    return (seq for seq in subsequences(items) if sum(seq) == k)


def first_subsequence_with_sum(items: Sequence[int], k: int) -> list[int] | None:
    """Return the first subsequence summing to ``k``, or None if there is none."""
    return next(subsequences_with_sum(items, k), None)


def count_subsequences_with_sum(items: Sequence[int], k: int) -> int:
    """Count the subsequences whose elements add up to ``k``."""

    def count(index: int, total: int) -> int:
        if index == len(items):
            return int(total == k)
        return count(index + 1, total + items[index]) + count(index + 1, total)

    return count(0, 0)