"""Shared test fixtures for the SSR test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from ssr.models import Point
from ssr.primes import DEFAULT_PRIME


def eval_poly(coeffs: Sequence[int], x: int, p: int) -> int:
    """Horner evaluation of sum_i coeffs[i] * x^i mod p."""
    result = 0
    for c in reversed(coeffs):
        result = (result * x + c) % p
    return result


@pytest.fixture
def small_prime() -> int:
    """A small prime for exhaustive field tests."""
    return 257


@pytest.fixture
def default_prime() -> int:
    return DEFAULT_PRIME


@pytest.fixture
def make_points() -> Callable[[Sequence[int], Sequence[int], int], list[Point]]:
    """Build shares (x, f(x)) of the polynomial with the given coefficients."""

    def _make(coeffs: Sequence[int], xs: Sequence[int], p: int) -> list[Point]:
        return [Point(x=x, y=eval_poly(coeffs, x, p)) for x in xs]

    return _make


@pytest.fixture
def sample_payload() -> dict:
    """Four shares of f(x) = x^2 + 3 in mixed bases; threshold 3."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def wide_payload() -> dict:
    """Nine shares with threshold 6 and values in bases 8 through 16."""
    return {
        "keys": {"n": 9, "k": 6},
        "1": {"base": "10", "value": "28735619723837"},
        "2": {"base": "16", "value": "1A228867F0CA"},
        "3": {"base": "12", "value": "32811A4AA0B7B"},
        "4": {"base": "11", "value": "917978721331A"},
        "5": {"base": "16", "value": "1A22886782E1"},
        "6": {"base": "10", "value": "28735619654702"},
        "7": {"base": "14", "value": "71AB5070CC4B"},
        "8": {"base": "9", "value": "122662581541670"},
        "9": {"base": "8", "value": "642121030037605"},
    }
