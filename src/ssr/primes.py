"""Field moduli and the policy for choosing one per reconstruction.

Candidates are assumed prime; nothing here tests primality.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ssr.errors import InvalidInputError

logger = logging.getLogger(__name__)

MERSENNE_127 = (1 << 127) - 1
DEFAULT_PRIME = (1 << 256) - 351 * (1 << 32) + 1
MERSENNE_521 = (1 << 521) - 1

KNOWN_PRIMES: tuple[int, ...] = (MERSENNE_127, DEFAULT_PRIME, MERSENNE_521)


def select_modulus(
    values: Iterable[int],
    candidates: Iterable[int] = KNOWN_PRIMES,
    preferred: int | None = DEFAULT_PRIME,
) -> int:
    """Choose a prime modulus strictly greater than every share value.

    The preferred prime wins whenever it is large enough, so the same share
    set always lands in the same field. Otherwise the smallest sufficient
    candidate is used.

    Args:
        values: Decoded share values the field must hold.
        candidates: Fallback prime moduli, in any order.
        preferred: Modulus to use when it dominates, or None to always take
            the smallest sufficient candidate.

    Returns:
        The chosen modulus.
    """
    largest = -1
    for v in values:
        if v < 0:
            raise InvalidInputError(f"Share values must be non-negative, got {v}")
        largest = max(largest, v)

    if preferred is not None and preferred > largest:
        return preferred

    for p in sorted(candidates):
        if p > largest:
            logger.debug("Falling back to a %d-bit modulus", p.bit_length())
            return p

    raise InvalidInputError(
        f"No candidate modulus exceeds the largest share value ({largest.bit_length()} bits)"
    )
