"""End-to-end reconstruction: decode a payload, pick k points and a field, interpolate.

Only the first k shares in payload order are used. Extra shares are not
checked against them, so a corrupted share among the first k yields a wrong
secret rather than an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ssr.decoding import decode_share, parse_payload
from ssr.errors import NotEnoughSharesError
from ssr.field import check_modulus
from ssr.interpolation import SecretReconstructor
from ssr.models import Point, SharePayload
from ssr.primes import select_modulus

logger = logging.getLogger(__name__)

PayloadLike = SharePayload | Mapping[str, Any]


def _as_payload(payload: PayloadLike) -> SharePayload:
    if isinstance(payload, SharePayload):
        return payload
    return parse_payload(payload)


def select_points(payload: PayloadLike) -> list[Point]:
    """Decode every share and keep the first k.

    Raises:
        NotEnoughSharesError: fewer than k shares decode.
    """
    payload = _as_payload(payload)
    points = [decode_share(s) for s in payload.shares]

    if len(points) < payload.k:
        raise NotEnoughSharesError(len(points), payload.k)
    if len(points) > payload.k:
        logger.warning(
            "Payload has %d shares for threshold %d; using the first %d",
            len(points), payload.k, payload.k,
        )
    return points[: payload.k]


def calculate_secret(payload: PayloadLike, prime: int | None = None) -> int:
    """Recover the secret (constant term) of one share payload.

    Args:
        payload: A SharePayload or the raw JSON object.
        prime: Field modulus. Chosen from the share values when None.

    Returns:
        The secret in [0, prime).
    """
    points = select_points(payload)
    if prime is None:
        prime = select_modulus(p.y for p in points)
    else:
        check_modulus(prime)

    logger.debug(
        "Reconstructing from indices %s over a %d-bit field",
        [p.x for p in points], prime.bit_length(),
    )
    return SecretReconstructor(prime).reconstruct(points)


def calculate_secrets(
    payloads: Iterable[PayloadLike],
    prime: int | None = None,
) -> list[int]:
    """Convenience: one independent reconstruction per payload."""
    return [calculate_secret(p, prime) for p in payloads]
