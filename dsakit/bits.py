"""Single-bit and bit-range manipulation on integers."""


def get_bit(n: int, position: int) -> int:
    """Return the bit of ``n`` at ``position`` as 0 or 1."""
    mask = 1 << position
    return (n & mask) >> position


def set_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` set."""
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` cleared."""
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """Return ``n`` with the bit at ``position`` replaced by ``value``."""
    return clear_bit(n, position) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """Return ``n`` with its lowest ``count`` bits cleared."""
    return n & (-1 << count)


def clear_bits_range(n: int, low: int, high: int) -> int:
    """Return ``n`` with bits ``low`` through ``high`` (inclusive) cleared."""
    upper = -1 << (high + 1)
    lower = (1 << low) - 1
    return n & (upper | lower)


def _require_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError("bit counting needs a non-negative integer")


def count_set_bits(n: int) -> int:
    """Count the 1 bits of ``n`` by inspecting one bit at a time."""
    _require_unsigned(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count the 1 bits of ``n`` by dropping the lowest set bit each step."""
    _require_unsigned(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count