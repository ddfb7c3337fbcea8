"""Shamir Secret Reconstruction (SSR).

Recovers a secret from a threshold set of Shamir shares by Lagrange
interpolation at x = 0 over a prime field.
"""

from ssr.errors import (
    DuplicateShareIndexError,
    InvalidInputError,
    NoInverseError,
    NotEnoughSharesError,
    ReconstructionError,
    ShareDecodeError,
)
from ssr.interpolation import SecretReconstructor, interpolate_at_zero, reconstruct_secret
from ssr.models import Point
from ssr.primes import DEFAULT_PRIME
from ssr.reconstruct import calculate_secret

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PRIME",
    "DuplicateShareIndexError",
    "InvalidInputError",
    "NoInverseError",
    "NotEnoughSharesError",
    "Point",
    "ReconstructionError",
    "SecretReconstructor",
    "ShareDecodeError",
    "calculate_secret",
    "interpolate_at_zero",
    "reconstruct_secret",
]
