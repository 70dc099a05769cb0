"""Unit tests for imported field validation."""

from __future__ import annotations

import pytest

from core.errors import InvalidRecordError
from core.types import Position
from ingest.field_parsing import build_employee_record, parse_positive_salary


def _fields(**overrides: str) -> dict[str, str]:
    fields = {
        "first_name": "Jan",
        "last_name": "Kowalski",
        "email": "jan@firm.pl",
        "company": "TechCorp",
        "position": "DEVELOPER",
        "salary": "9000",
    }
    fields.update(overrides)
    return fields


def test_build_employee_record_returns_active_record() -> None:
    """Valid tokens should produce an active record."""
    record = build_employee_record(_fields())

    assert record.position is Position.DEVELOPER and record.salary == 9000.0


def test_build_employee_record_checks_position_before_salary() -> None:
    """A unit with two bad tokens should report the position first."""
    with pytest.raises(InvalidRecordError, match="Invalid position: BOSS"):
        build_employee_record(_fields(position="BOSS", salary="abc"))


@pytest.mark.parametrize(
    "token",
    ["abc", "", "nan", "inf", "12,5", "9_000", "\uff19\uff10\uff10\uff10", "1e999", "0x10"],
)
def test_parse_positive_salary_rejects_bad_format(token: str) -> None:
    """Non-numeric and non-finite tokens should be format errors."""
    with pytest.raises(InvalidRecordError, match="Invalid salary format"):
        parse_positive_salary(token)


@pytest.mark.parametrize("token", ["0", "-1", "-0.5"])
def test_parse_positive_salary_rejects_non_positive(token: str) -> None:
    """Zero and negative salaries should be rejected on import."""
    with pytest.raises(InvalidRecordError, match="Salary must be positive"):
        parse_positive_salary(token)


def test_parse_positive_salary_accepts_decimal() -> None:
    """Decimal salaries should parse as floats."""
    assert parse_positive_salary(" 8500.75 ") == 8500.75


@pytest.mark.parametrize(("token", "expected"), [("1e3", 1000.0), (".5", 0.5), ("+7", 7.0)])
def test_parse_positive_salary_accepts_plain_decimal_forms(token: str, expected: float) -> None:
    """Signed, fractional, and exponent forms should parse."""
    assert parse_positive_salary(token) == expected
