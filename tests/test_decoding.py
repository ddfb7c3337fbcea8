"""Tests for ssr.decoding module."""

from __future__ import annotations

import json

import pytest

from ssr.decoding import decode_share, decode_value, load_payload, parse_payload
from ssr.errors import InvalidInputError, ShareDecodeError
from ssr.models import EncodedShare, Point


class TestDecodeValue:
    @pytest.mark.parametrize(
        "digits,base,expected",
        [
            ("111", 2, 7),
            ("213", 4, 39),
            ("12", 10, 12),
            ("ff", 16, 255),
            ("FF", 16, 255),
            ("z", 36, 35),
            ("0", 7, 0),
        ],
    )
    def test_known_values(self, digits: str, base: int, expected: int):
        assert decode_value(digits, base) == expected

    def test_exact_beyond_float_precision(self):
        digits = "9" * 80
        assert decode_value(digits, 10) == 10**80 - 1

    def test_wide_hex(self):
        assert decode_value("f" * 64, 16) == (1 << 256) - 1

    @pytest.mark.parametrize("digits,base", [("2", 2), ("8", 8), ("g", 16), ("1_0", 10), ("-1", 10)])
    def test_invalid_digit(self, digits: str, base: int):
        with pytest.raises(ShareDecodeError, match="Invalid digit"):
            decode_value(digits, base)

    @pytest.mark.parametrize("digits", [" 12", "0x1f", "+5"])
    def test_no_prefix_or_whitespace(self, digits: str):
        with pytest.raises(ShareDecodeError):
            decode_value(digits, 16)

    def test_empty(self):
        with pytest.raises(ShareDecodeError, match="Empty"):
            decode_value("", 10)

    def test_too_long_for_conversion(self):
        with pytest.raises(ShareDecodeError, match="too long"):
            decode_value("1" * 5000, 10)

    def test_long_power_of_two_base(self):
        assert decode_value("1" * 5000, 2) == (1 << 5000) - 1

    @pytest.mark.parametrize("base", [0, 1, 37])
    def test_base_out_of_range(self, base: int):
        with pytest.raises(ShareDecodeError, match="base"):
            decode_value("1", base)

    def test_decode_error_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            decode_value("", 10)


class TestDecodeShare:
    def test_decode(self):
        assert decode_share(EncodedShare(index=6, base=4, value="213")) == Point(6, 39)


class TestParsePayload:
    def test_sample(self, sample_payload: dict):
        payload = parse_payload(sample_payload)
        assert payload.n == 4
        assert payload.k == 3
        assert [s.index for s in payload.shares] == [1, 2, 3, 6]
        assert payload.shares[1] == EncodedShare(index=2, base=2, value="111")

    def test_order_preserved(self):
        data = {"keys": {"n": 2, "k": 2}, "5": {"base": "10", "value": "1"}, "2": {"base": "10", "value": "2"}}
        assert [s.index for s in parse_payload(data).shares] == [5, 2]

    def test_integer_fields(self):
        data = {"keys": {"n": 1, "k": 1}, "1": {"base": 16, "value": "a"}}
        assert parse_payload(data).shares[0].base == 16

    def test_missing_keys(self):
        with pytest.raises(ShareDecodeError, match="keys"):
            parse_payload({"1": {"base": "10", "value": "4"}})

    def test_not_an_object(self):
        with pytest.raises(ShareDecodeError, match="object"):
            parse_payload([1, 2, 3])  # type: ignore[arg-type]

    def test_bad_threshold(self):
        with pytest.raises(ShareDecodeError, match="keys.k"):
            parse_payload({"keys": {"n": 3, "k": "three"}})

    def test_k_greater_than_n(self):
        with pytest.raises(ShareDecodeError, match="n >= k"):
            parse_payload({"keys": {"n": 2, "k": 3}})

    def test_non_integer_index(self):
        with pytest.raises(ShareDecodeError, match="share index"):
            parse_payload({"keys": {"n": 1, "k": 1}, "x": {"base": "10", "value": "4"}})

    def test_bad_base(self):
        with pytest.raises(ShareDecodeError, match="Share 1"):
            parse_payload({"keys": {"n": 1, "k": 1}, "1": {"base": "40", "value": "4"}})

    def test_value_not_string(self):
        with pytest.raises(ShareDecodeError, match="value must be a string"):
            parse_payload({"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": 4}})

    def test_entry_not_object(self):
        with pytest.raises(ShareDecodeError, match="must be an object"):
            parse_payload({"keys": {"n": 1, "k": 1}, "1": "4"})

    def test_boolean_rejected(self):
        with pytest.raises(ShareDecodeError, match="keys.n"):
            parse_payload({"keys": {"n": True, "k": 1}})


class TestLoadPayload:
    def test_load(self, tmp_path, sample_payload: dict):
        path = tmp_path / "shares.json"
        path.write_text(json.dumps(sample_payload), encoding="utf-8")
        payload = load_payload(path)
        assert payload.k == 3
        assert payload.num_shares == 4

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ShareDecodeError, match="invalid JSON"):
            load_payload(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(ShareDecodeError, match="not UTF-8"):
            load_payload(path)
