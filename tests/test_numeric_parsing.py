import decimal
import math

import numpy as np
import pytest

from array_console.core.input_validation import InvalidArgumentError
from array_console.core.numeric_parsing import NUMERIC_KINDS, get_numeric_kind, parse_numeric


def test_all_kinds_are_registered():
    assert set(NUMERIC_KINDS) == {
        "int8", "int16", "int32", "int64",
        "uint8", "uint16", "uint32", "uint64",
        "float32", "float64", "decimal",
    }


def test_get_numeric_kind_accepts_names_dtypes_and_types():
    assert get_numeric_kind("int16").dtype == np.dtype(np.int16)
    assert get_numeric_kind(np.dtype("uint32")).name == "uint32"
    assert get_numeric_kind(np.float64).name == "float64"
    assert get_numeric_kind(decimal.Decimal).name == "decimal"


@pytest.mark.parametrize("kind", ["complex128", "bogus", object, np.dtype(object)])
def test_get_numeric_kind_rejects_unsupported(kind):
    with pytest.raises(InvalidArgumentError):
        get_numeric_kind(kind)


@pytest.mark.parametrize(
    "text,kind,expected",
    [
        ("42\n", "int32", 42),
        ("  -7  \n", "int8", -7),
        ("+5", "int64", 5),
        ("255", "uint8", 255),
        ("-128", "int8", -128),
        ("18446744073709551615", "uint64", 2 ** 64 - 1),
    ],
)
def test_parse_integers(text, kind, expected):
    parsed = parse_numeric(text, kind)
    assert parsed.is_valid
    assert int(parsed.value) == expected
    assert parsed.value.dtype == np.dtype(kind)


@pytest.mark.parametrize(
    "text,kind",
    [
        ("", "int32"),
        ("\n", "int32"),
        ("abc", "int32"),
        ("1.5", "int32"),
        ("1 2", "int32"),
        ("1_000", "int32"),
        ("1,000", "int32"),
        ("256", "uint8"),
        ("-1", "uint8"),
        ("128", "int8"),
        ("1e3", "int64"),
    ],
)
def test_parse_integers_rejects_malformed_or_out_of_range(text, kind):
    assert parse_numeric(text, kind).is_valid is False


def test_parse_none_is_invalid():
    assert parse_numeric(None, "int32").is_valid is False


@pytest.mark.parametrize(
    "text,expected",
    [("1.5", 1.5), ("-2", -2.0), (".25", 0.25), ("3.", 3.0), ("1e3", 1000.0), ("2.5E-1", 0.25)],
)
def test_parse_floats(text, expected):
    parsed = parse_numeric(text, "float64")
    assert parsed.is_valid
    assert parsed.value == expected


def test_parse_float_special_values():
    assert math.isnan(parse_numeric("NaN", "float64").value)
    assert parse_numeric("Infinity", "float64").value == math.inf
    assert parse_numeric("-Infinity", "float32").value == -math.inf


def test_parse_float32_overflow_is_infinite():
    parsed = parse_numeric("1e40", "float32")
    assert parsed.is_valid
    assert np.isinf(parsed.value)
    assert parsed.value.dtype == np.float32


@pytest.mark.parametrize("text", ["1,5", "inf", "nan", "1.2.3", "e5", "- 1"])
def test_parse_floats_rejects_non_canonical_text(text):
    assert parse_numeric(text, "float64").is_valid is False


def test_parse_decimal_keeps_exact_value():
    parsed = parse_numeric("0.10\n", "decimal")
    assert parsed.is_valid
    assert parsed.value == decimal.Decimal("0.10")
    assert isinstance(parsed.value, decimal.Decimal)


def test_parse_decimal_rejects_exponent():
    assert parse_numeric("1e3", "decimal").is_valid is False
