"""Employee record filtering helpers.

This module applies company and status constraints to record snapshots.
It keeps filtering logic reusable across the registry and analytics.
"""

from __future__ import annotations

from typing import Iterable

from core.errors import RosterQueryError
from core.types import EmployeeRecord, EmploymentStatus


def filter_by_company(
    records: Iterable[EmployeeRecord],
    company: str,
) -> list[EmployeeRecord]:
    """Select records employed by one company.

    Args:
        records: Input records to filter.
        company: Exact, case-sensitive company name.

    Returns:
        Matching records in input order.

    Raises:
        RosterQueryError: If company name is blank.
    """
    require_company_name(company)
    return [record for record in records if record.company == company]


def filter_by_status(
    records: Iterable[EmployeeRecord],
    status: EmploymentStatus,
) -> list[EmployeeRecord]:
    """Select records with one employment status.

    Records without a status are treated as active.

    Raises:
        RosterQueryError: If status is not an EmploymentStatus.
    """
    if not isinstance(status, EmploymentStatus):
        raise RosterQueryError(f"Invalid status filter: {status!r}")
    return [record for record in records if record.effective_status is status]


def require_company_name(company: object) -> str:
    """Validate a company query argument.

    Raises:
        RosterQueryError: If company name is missing or blank.
    """
    if not isinstance(company, str) or not company.strip():
        raise RosterQueryError("Company name cannot be blank")
    return company
