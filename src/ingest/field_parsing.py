"""Field-level validation for imported employee units.

This module turns raw field tokens into a validated EmployeeRecord.
Both the CSV and XML importers share these rules.
"""

from __future__ import annotations

import math
import re
from typing import Mapping

from core.errors import InvalidRecordError
from core.types import EmployeeRecord, Position

_SALARY_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def build_employee_record(fields: Mapping[str, str]) -> EmployeeRecord:
    """Build a record from raw field tokens.

    Args:
        fields: Tokens keyed by ``first_name``, ``last_name``, ``email``,
            ``company``, ``position`` and ``salary``.

    Returns:
        Validated employee record.

    Raises:
        InvalidRecordError: If any token fails validation.
    """
    position = Position.parse(fields["position"])
    salary = parse_positive_salary(fields["salary"])
    return EmployeeRecord(
        first_name=fields["first_name"].strip(),
        last_name=fields["last_name"].strip(),
        email=fields["email"].strip(),
        company=fields["company"].strip(),
        position=position,
        salary=salary,
    )


def parse_positive_salary(token: str) -> float:
    """Parse a salary token that must be strictly positive.

    Imported salaries of zero are rejected even though a record built
    directly may carry a zero salary.

    Raises:
        InvalidRecordError: If the token is not a finite number above zero.
    """
    cleaned = token.strip()
    if not _SALARY_PATTERN.fullmatch(cleaned):
        raise InvalidRecordError(f"Invalid salary format: {cleaned}")
    salary = float(cleaned)
    if not math.isfinite(salary):
        raise InvalidRecordError(f"Invalid salary format: {cleaned}")
    if salary <= 0:
        raise InvalidRecordError("Salary must be positive")
    return salary
