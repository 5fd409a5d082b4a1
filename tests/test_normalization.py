from __future__ import annotations

from datetime import date, datetime

import pytest

from railatlas.ingestion.normalize import finite_float, parse_year, safe_float, safe_int, safe_str


@pytest.mark.parametrize(
    ("value", "year"),
    [
        ("1898-08-16", 1898),
        ("1898-08", 1898),
        ("1898", 1898),
        ("1975-06-01T10:30:00", 1975),
        ("1975-06-01T10:30:00+03:00", 1975),
        (" 1903-07-21 ", 1903),
        (date(1851, 11, 1), 1851),
        (datetime(1936, 1, 10, 12, 0), 1936),
        (1916, 1916),
    ],
)
def test_parse_year_accepts_dates(value: object, year: int) -> None:
    assert parse_year(value) == year


@pytest.mark.parametrize("value", [None, "", "   ", "unknown", "1898-13", "18/08/1898", True, 1898.5])
def test_parse_year_rejects_garbage(value: object) -> None:
    assert parse_year(value) is None


def test_safe_float_handles_placeholders() -> None:
    assert safe_float("12.5") == 12.5
    assert safe_float("--") is None
    assert safe_float("") is None
    assert safe_float("abc") is None
    assert safe_float(float("nan")) is None
    assert safe_float(False) is None
    assert safe_float(10**400) is None


def test_finite_float_rejects_infinity() -> None:
    assert finite_float("inf") is None
    assert finite_float(float("-inf")) is None
    assert finite_float("3") == 3.0


def test_safe_int_and_str() -> None:
    assert safe_int("42.9") == 42
    assert safe_int("inf") is None
    assert safe_str("  x ") == "x"
    assert safe_str("   ") is None
    assert safe_str(None) is None
