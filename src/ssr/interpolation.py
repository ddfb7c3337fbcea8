"""Lagrange interpolation at x = 0 over GF(p).

Recovers the constant term of the unique degree-(k-1) polynomial through
k points, i.e. the secret of a Shamir (n, k) sharing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ssr.errors import DuplicateShareIndexError, InvalidInputError, NoInverseError
from ssr.field import check_modulus, inverse, mulmod, reduce
from ssr.models import Point, PointSet, as_point
from ssr.primes import DEFAULT_PRIME

logger = logging.getLogger(__name__)


def interpolate_at_zero(points: PointSet, modulus: int) -> int:
    """Lagrange interpolation evaluated at x = 0.

    For points (x_i, y_i), the Lagrange basis polynomial at x=0 is:
        L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)

    The interpolated value at 0 is sum_i y_i * L_i(0). The point count is
    trusted as the threshold.

    Raises:
        DuplicateShareIndexError: two x values are congruent mod the modulus.
        NoInverseError: a denominator with no zero factor is not invertible,
            so the modulus is not prime.
    """
    pts = [as_point(p) for p in points]
    lambdas = lagrange_coefficients_at_zero([p.x for p in pts], modulus)

    secret = 0
    for pt, lam in zip(pts, lambdas, strict=True):
        secret = reduce(secret + mulmod(pt.y, lam, modulus), modulus)
    return secret


def lagrange_coefficients_at_zero(x_values: Sequence[int], modulus: int) -> list[int]:
    """Basis values L_i(0) for the given share indices.

    Reconstructing several secrets shared at the same indices then costs one
    dot product each: secret = sum_i y_i * L_i(0) mod p.
    """
    n = len(x_values)
    lambdas = []
    for i in range(n):
        xi = x_values[i]
        numerator = 1
        denominator = 1
        zero_factor = False
        for j in range(n):
            if i == j:
                continue
            diff = reduce(xi - x_values[j], modulus)
            zero_factor = zero_factor or diff == 0
            numerator = mulmod(numerator, reduce(-x_values[j], modulus), modulus)
            denominator = mulmod(denominator, diff, modulus)

        try:
            inv = inverse(denominator, modulus)
        except NoInverseError as exc:
            # A zero factor is a repeated index; otherwise the modulus is composite.
            if zero_factor:
                raise DuplicateShareIndexError(xi) from exc
            raise
        lambdas.append(mulmod(numerator, inv, modulus))
    return lambdas


class SecretReconstructor:
    """Threshold secret reconstruction over GF(p). Default prime: 2^256 - 351*2^32 + 1."""

    def __init__(self, prime: int = DEFAULT_PRIME) -> None:
        check_modulus(prime)
        self.p = prime

    def reconstruct(self, points: PointSet) -> int:
        """Reconstruct the secret from exactly k points via Lagrange interpolation at x=0."""
        if not points:
            raise InvalidInputError("Need at least one point to reconstruct")

        pts = [as_point(p) for p in points]
        seen: set[int] = set()
        for pt in pts:
            if pt.x in seen:
                raise DuplicateShareIndexError(pt.x)
            seen.add(pt.x)

        field_pts = [Point(x=pt.x, y=reduce(pt.y, self.p)) for pt in pts]
        logger.debug(
            "Interpolating %d points over a %d-bit field", len(field_pts), self.p.bit_length()
        )
        return interpolate_at_zero(field_pts, self.p)

    def coefficients(self, x_values: Sequence[int]) -> list[int]:
        """Lagrange basis values at 0 for the given indices in this field."""
        return lagrange_coefficients_at_zero(x_values, self.p)


def reconstruct_secret(
    points: PointSet,
    prime: int = DEFAULT_PRIME,
) -> int:
    """Convenience: reconstruct secret from points."""
    return SecretReconstructor(prime).reconstruct(points)
