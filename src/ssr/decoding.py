"""Share decoding: digit strings in bases 2..36 and JSON share payloads.

Payload layout::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than ``keys`` is a share index.
"""

from __future__ import annotations

import json
import string
from collections.abc import Mapping
from os import PathLike
from typing import Any

from ssr.errors import InvalidInputError, ShareDecodeError
from ssr.models import MAX_BASE, MIN_BASE, EncodedShare, Point, SharePayload

_DIGIT_VALUES = {c: i for i, c in enumerate(string.digits + string.ascii_lowercase)}

KEYS_FIELD = "keys"


def decode_value(digits: str, base: int) -> int:
    """Exact positional conversion of a digit string, case-insensitive.

    No sign, prefix, whitespace or separator is accepted.
    """
    if not MIN_BASE <= base <= MAX_BASE:
        raise ShareDecodeError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    if not digits:
        raise ShareDecodeError("Empty share value")

    for c in digits.lower():
        v = _DIGIT_VALUES.get(c)
        if v is None or v >= base:
            raise ShareDecodeError(f"Invalid digit {c!r} for base {base} in {digits!r}")

    try:
        return int(digits, base)
    except ValueError as exc:
        # CPython caps decimal-style conversions (sys.get_int_max_str_digits).
        raise ShareDecodeError(f"Share value too long ({len(digits)} digits)") from exc


def decode_share(share: EncodedShare) -> Point:
    return Point(x=share.index, y=decode_value(share.value, share.base))


def parse_payload(data: Mapping[str, Any]) -> SharePayload:
    """Build a SharePayload from the decoded JSON object, keeping share order."""
    if not isinstance(data, Mapping):
        raise ShareDecodeError(f"Payload must be an object, got {type(data).__name__}")

    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise ShareDecodeError(f"Payload is missing the {KEYS_FIELD!r} object")

    n = _as_int(keys.get("n"), "keys.n")
    k = _as_int(keys.get("k"), "keys.k")

    shares = []
    for name, entry in data.items():
        if name == KEYS_FIELD:
            continue
        if not isinstance(entry, Mapping):
            raise ShareDecodeError(f"Share {name!r} must be an object")
        index = _as_int(name, "share index")
        base = _as_int(entry.get("base"), f"share {name} base")
        value = entry.get("value")
        if not isinstance(value, str):
            raise ShareDecodeError(f"Share {name} value must be a string")
        try:
            shares.append(EncodedShare(index=index, base=base, value=value))
        except InvalidInputError as exc:
            raise ShareDecodeError(f"Share {name}: {exc}") from exc

    try:
        return SharePayload(n=n, k=k, shares=tuple(shares))
    except InvalidInputError as exc:
        raise ShareDecodeError(str(exc)) from exc


def load_payload(path: str | PathLike[str]) -> SharePayload:
    """Read and parse a JSON share payload file."""
    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except UnicodeDecodeError as exc:
            raise ShareDecodeError(f"{path}: not UTF-8 ({exc.reason})") from exc
        except json.JSONDecodeError as exc:
            raise ShareDecodeError(f"{path}: invalid JSON ({exc})") from exc
    return parse_payload(data)


def _as_int(raw: Any, what: str) -> int:
    if isinstance(raw, bool):
        raise ShareDecodeError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 10)
        except ValueError as exc:
            raise ShareDecodeError(f"{what} must be an integer, got {raw!r}") from exc
    raise ShareDecodeError(f"{what} must be an integer, got {raw!r}")
