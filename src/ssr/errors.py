"""Exception hierarchy for secret reconstruction."""

from __future__ import annotations


class ReconstructionError(Exception):
    """Base class for every error raised by this package."""


class NoInverseError(ReconstructionError, ArithmeticError):
    """A modular inverse does not exist (gcd(a, modulus) != 1)."""

    def __init__(self, a: int, modulus: int) -> None:
        super().__init__(f"No inverse of {a} modulo {modulus}")
        self.a = a
        self.modulus = modulus


class DuplicateShareIndexError(ReconstructionError):
    """Two shares in one point set carry the same index."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate share index x={x}")
        self.x = x


class InvalidInputError(ReconstructionError, ValueError):
    """A caller-side precondition does not hold."""


class ShareDecodeError(InvalidInputError):
    """A share or payload could not be decoded."""


class NotEnoughSharesError(InvalidInputError):
    """Fewer shares are available than the reconstruction threshold."""

    def __init__(self, available: int, required: int) -> None:
        super().__init__(
            f"Not enough shares for interpolation: got {available}, need {required}"
        )
        self.available = available
        self.required = required
