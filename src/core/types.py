"""Shared typed models.

This module defines the employee value object, its closed position and
status enumerations, and the immutable result models produced by the
import pipeline and analytics layer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from types import MappingProxyType
from typing import Mapping

from core.constants import ERROR_LINE_TEMPLATE
from core.errors import InvalidRecordError


class Position(Enum):
    """Closed set of positions an employee can hold."""

    PRESIDENT = "PRESIDENT"
    VICE_PRESIDENT = "VICE_PRESIDENT"
    MANAGER = "MANAGER"
    DEVELOPER = "DEVELOPER"
    INTERN = "INTERN"

    @property
    def base_salary(self) -> float:
        """Reference salary for this position."""
        return POSITION_PROFILES[self].base_salary

    @property
    def hierarchy_level(self) -> int:
        """Seniority rank, lower is more senior."""
        return POSITION_PROFILES[self].hierarchy_level

    @classmethod
    def parse(cls, token: str) -> "Position":
        """Match a position token case-insensitively.

        Args:
            token: Raw position text, surrounding whitespace allowed.

        Returns:
            Matching position member.

        Raises:
            InvalidRecordError: If the token names no position.
        """
        normalized = token.strip().upper()
        member = cls.__members__.get(normalized)
        if member is None:
            raise InvalidRecordError(f"Invalid position: {token.strip()}")
        return member


@dataclass(frozen=True)
class PositionProfile:
    """Static constants attached to a position.

    Attributes:
        base_salary: Reference salary used for consistency checks.
        hierarchy_level: Seniority rank, 1 is the most senior.
    """

    base_salary: float
    hierarchy_level: int


POSITION_PROFILES: Mapping[Position, PositionProfile] = MappingProxyType(
    {
        Position.PRESIDENT: PositionProfile(base_salary=25000.0, hierarchy_level=1),
        Position.VICE_PRESIDENT: PositionProfile(base_salary=18000.0, hierarchy_level=2),
        Position.MANAGER: PositionProfile(base_salary=12000.0, hierarchy_level=3),
        Position.DEVELOPER: PositionProfile(base_salary=8000.0, hierarchy_level=4),
        Position.INTERN: PositionProfile(base_salary=3000.0, hierarchy_level=5),
    }
)


class EmploymentStatus(Enum):
    """Lifecycle status of an employee."""

    ACTIVE = "ACTIVE"
    ON_LEAVE = "ON_LEAVE"
    TERMINATED = "TERMINATED"

    @classmethod
    def parse(cls, token: str) -> "EmploymentStatus":
        """Match a status token case-insensitively.

        Raises:
            InvalidRecordError: If the token names no status.
        """
        member = cls.__members__.get(token.strip().upper())
        if member is None:
            raise InvalidRecordError(f"Invalid status: {token.strip()}")
        return member


@dataclass(frozen=True, eq=False)
class EmployeeRecord:
    """Validated employee value object.

    Equality and hashing use only the case-normalized email, so two records
    for the same person compare equal even when other fields differ.

    Attributes:
        first_name: Given name, non-blank.
        last_name: Family name, non-blank.
        email: Identity key, unique per registry ignoring case.
        company: Employing company name, non-blank.
        position: Held position.
        salary: Salary, finite and non-negative.
        status: Employment status; ``None`` marks a legacy record without one.
    """

    first_name: str
    last_name: str
    email: str
    company: str
    position: Position
    salary: float
    status: EmploymentStatus | None = EmploymentStatus.ACTIVE

    def __post_init__(self) -> None:
        _require_text(self.first_name, "First name")
        _require_text(self.last_name, "Last name")
        _require_text(self.email, "Email")
        _require_text(self.company, "Company")
        _require_position(self.position)
        object.__setattr__(self, "salary", _validate_salary(self.salary))
        if self.status is not None and not isinstance(self.status, EmploymentStatus):
            raise InvalidRecordError(f"Invalid status: {self.status!r}")

    @classmethod
    def with_base_salary(
        cls,
        first_name: str,
        last_name: str,
        email: str,
        company: str,
        position: Position,
        status: EmploymentStatus | None = EmploymentStatus.ACTIVE,
    ) -> "EmployeeRecord":
        """Create a record paid the base salary of its position.

        Raises:
            InvalidRecordError: If any field is invalid.
        """
        _require_position(position)
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            company=company,
            position=position,
            salary=position.base_salary,
            status=status,
        )

    @property
    def identity_key(self) -> str:
        """Case-normalized email used for equality and registry keys."""
        return normalize_email(self.email)

    @property
    def full_name(self) -> str:
        """Display name formatted as ``first last``."""
        return f"{self.first_name} {self.last_name}"

    @property
    def effective_status(self) -> EmploymentStatus:
        """Status with legacy unset values treated as active."""
        return self.status or EmploymentStatus.ACTIVE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmployeeRecord):
            return NotImplemented
        return self.identity_key == other.identity_key

    def __hash__(self) -> int:
        return hash(self.identity_key)


def normalize_email(email: str) -> str:
    """Normalize an email into its case-insensitive identity key."""
    return email.strip().casefold()


def _require_text(value: object, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(f"{label} cannot be blank")


def _require_position(position: object) -> None:
    if position is None:
        raise InvalidRecordError("Position cannot be None")
    if not isinstance(position, Position):
        raise InvalidRecordError(f"Invalid position: {position!r}")


def _validate_salary(salary: object) -> float:
    if isinstance(salary, bool) or not isinstance(salary, Real):
        raise InvalidRecordError(f"Salary must be a number, got {salary!r}")
    value = float(salary)
    if not math.isfinite(value):
        raise InvalidRecordError(f"Salary must be finite, got {salary!r}")
    if value < 0:
        raise InvalidRecordError("Salary cannot be negative")
    return value


@dataclass(frozen=True)
class ImportOutcome:
    """Result of importing one source unit.

    Attributes:
        line_number: One-based line (CSV) or element index (XML);
            zero for failures that affect the whole source.
        email: Email of the imported or rejected record when known.
        error: Failure message, ``None`` when the unit was imported.
    """

    line_number: int
    email: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the unit was added to the registry."""
        return self.error is None

    def render_error(self) -> str:
        """Format the failure as a ``Line N: message`` string."""
        return ERROR_LINE_TEMPLATE.format(position=self.line_number, message=self.error)


@dataclass(frozen=True)
class ImportSummary:
    """Accumulated outcome of one bulk import call.

    Attributes:
        source: Path or label of the imported source.
        outcomes: Per-unit outcomes in source order.
    """

    source: str
    outcomes: tuple[ImportOutcome, ...] = ()

    @property
    def imported_count(self) -> int:
        """Count units added to the registry."""
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed_count(self) -> int:
        """Count units rejected during import."""
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)

    @property
    def errors(self) -> list[str]:
        """Rendered ``Line N: message`` errors in source order."""
        return [outcome.render_error() for outcome in self.outcomes if not outcome.succeeded]

    @property
    def has_errors(self) -> bool:
        """Whether any unit or the source itself failed."""
        return self.failed_count > 0


@dataclass(frozen=True)
class CompanyStatistics:
    """Derived per-company salary statistics.

    Attributes:
        employee_count: Number of employees in the company.
        average_salary: Mean salary of the company's employees.
        highest_paid_employee: Full name of the top earner, ``"None"`` if empty.
        highest_salary: Salary of the top earner, 0.0 if empty.
    """

    employee_count: int
    average_salary: float
    highest_paid_employee: str
    highest_salary: float = 0.0

    def to_payload(self) -> dict[str, object]:
        """Serialize statistics into a JSON-safe payload."""
        return {
            "employee_count": self.employee_count,
            "average_salary": self.average_salary,
            "highest_paid_employee": self.highest_paid_employee,
            "highest_salary": self.highest_salary,
        }
