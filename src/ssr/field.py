"""Exact arithmetic over Z/PZ on plain Python ints.

Every function takes the modulus explicitly; nothing here holds state.
"""

from __future__ import annotations

from ssr.errors import InvalidInputError, NoInverseError


def check_modulus(modulus: int) -> None:
    """Fail fast on a modulus that cannot define a field. Primality is not checked."""
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        raise InvalidInputError(f"Modulus must be an int, got {type(modulus).__name__}")
    if modulus < 2:
        raise InvalidInputError(f"Modulus must be >= 2, got {modulus}")


def reduce(a: int, modulus: int) -> int:
    """Normalize a into [0, modulus), negative a included."""
    return ((a % modulus) + modulus) % modulus


def mulmod(a: int, b: int, modulus: int) -> int:
    return reduce(a * b, modulus)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Returns (g, x, y) with g = gcd(a, b) = a*x + b*y. Iterative, so depth
    stays O(log b) without recursion; the coefficients are the ones the
    recursive form ``egcd(b, a % b)`` produces.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def inverse(a: int, modulus: int) -> int:
    """Multiplicative inverse of a modulo modulus.

    Raises:
        NoInverseError: gcd(a, modulus) != 1, which includes a ≡ 0.
    """
    a = reduce(a, modulus)
    g, x, _ = extended_gcd(a, modulus)
    if g != 1:
        raise NoInverseError(a, modulus)
    return reduce(x, modulus)
