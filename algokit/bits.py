"""Bit manipulation helpers: single-bit operations, complements, conversions and XOR tricks."""

from __future__ import annotations

__all__ = [
    "check_set_bit",
    "set_bit",
    "clear_bit",
    "toggle_bit",
    "clear_last_set_bit",
    "is_power_of_two",
    "ones_complement",
    "twos_complement",
    "to_binary",
    "to_decimal",
    "max_value_for_bits",
    "xor_from_one",
    "xor_in_range",
    "count_set_bits",
    "count_set_bits_kernighan",
    "count_set_bits_by_mask",
]

_MASK_WIDTH = 31


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def check_set_bit(n: int, i: int) -> bool:
    """Return True if bit ``i`` of ``n`` is 1."""
    _require_non_negative(i, "bit index")
    return n & (1 << i) != 0


def set_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set to 1."""
    _require_non_negative(i, "bit index")
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared to 0."""
    _require_non_negative(i, "bit index")
    return n & ~(1 << i)


def toggle_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` flipped."""
    _require_non_negative(i, "bit index")
    return n ^ (1 << i)


def clear_last_set_bit(n: int) -> int:
    """Return ``n`` with its rightmost set bit cleared."""
    return n & (n - 1)


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` has exactly one set bit."""
    return n > 0 and n & (n - 1) == 0


def _width(n: int) -> int:
    return max(n.bit_length(), 1)


def ones_complement(n: int) -> int:
    """Flip every bit of the binary representation of a non-negative ``n``."""
    _require_non_negative(n, "n")
    return n ^ ((1 << _width(n)) - 1)


def twos_complement(n: int) -> int:
    """Return the one's complement of ``n`` plus one, kept to the width of ``n``."""
    _require_non_negative(n, "n")
    mask = (1 << _width(n)) - 1
    return (ones_complement(n) + 1) & mask


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    _require_non_negative(n, "n")
    digits = []
    while n > 0:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits)) or "0"


def to_decimal(s: str) -> int:
    """Parse a string of binary digits; an empty string is zero."""
    if not set(s) <= {"0", "1"}:
        raise ValueError(f"not a binary string: {s!r}")
    value = 0
    for digit in s:
        value = value * 2 + (digit == "1")
    return value


def max_value_for_bits(bits: int) -> int:
    """Return the largest integer representable in ``bits`` bits."""
    _require_non_negative(bits, "bits")
    return (1 << bits) - 1


def xor_from_one(n: int) -> int:
    """Return 1 ^ 2 ^ ... ^ n, using the period-4 pattern."""
    _require_non_negative(n, "n")
    remainder = n % 4
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    if remainder == 3:
        return 0
    return n


def xor_in_range(left: int, right: int) -> int:
    """Return left ^ (left + 1) ^ ... ^ right."""
    _require_non_negative(left, "left")
    if left > right:
        raise ValueError(f"empty range: {left} > {right}")
    below = xor_from_one(left - 1) if left > 0 else 0
    return below ^ xor_from_one(right)


def count_set_bits(n: int) -> int:
    """Count set bits by inspecting the lowest bit and shifting."""
    _require_non_negative(n, "n")
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_kernighan(n: int) -> int:
    """Count set bits by clearing the rightmost one repeatedly."""
    _require_non_negative(n, "n")
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def count_set_bits_by_mask(n: int) -> int:
    """Count set bits among the low 31 bits of ``n``."""
    _require_non_negative(n, "n")
    return sum(1 for i in range(_MASK_WIDTH) if n & (1 << i))