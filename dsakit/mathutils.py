"""Number-theory helpers."""


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    if b == 0:
        raise ValueError("the second number must not be zero")
    while a % b:
        a, b = b, a % b
    return b