"""Data models for shares, points and share payloads."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ssr.errors import InvalidInputError

MIN_BASE = 2
MAX_BASE = 36


@dataclass(frozen=True)
class Point:
    """A decoded share (x, y): x is the share index, y its value."""

    x: int
    y: int


# Bare (x, y) tuples are accepted wherever a Point is.
PointLike = Point | tuple[int, int]
PointSet = Sequence[PointLike]


def as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x=x, y=y)


@dataclass(frozen=True)
class EncodedShare:
    """A share as transported: its index and its value as digits in some base."""

    index: int
    base: int
    value: str

    def __post_init__(self) -> None:
        if not MIN_BASE <= self.base <= MAX_BASE:
            raise InvalidInputError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {self.base}")


@dataclass(frozen=True)
class SharePayload:
    """A full share set: n shares issued, k needed to reconstruct.

    Attributes:
        n: Number of shares issued.
        k: Reconstruction threshold.
        shares: Encoded shares in payload order.
    """

    n: int
    k: int
    shares: tuple[EncodedShare, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.k < 1:
            raise InvalidInputError(f"k must be >= 1, got {self.k}")
        if self.n < self.k:
            raise InvalidInputError(f"Need n >= k, got n={self.n}, k={self.k}")

    @property
    def num_shares(self) -> int:
        return len(self.shares)
