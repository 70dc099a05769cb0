"""Employee aggregation queries.

This module computes sorted views, groupings, salary averages and
extremes, and per-company statistics over a record snapshot. Every
function is pure and accepts an empty input without raising.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import NO_TOP_EARNER_LABEL
from core.types import CompanyStatistics, EmployeeRecord, Position
from store.record_filtering import filter_by_company


def sort_by_last_name(records: Iterable[EmployeeRecord]) -> list[EmployeeRecord]:
    """Return records sorted ascending by last name, stable for ties."""
    return sorted(records, key=lambda record: record.last_name)


def sort_by_seniority(records: Iterable[EmployeeRecord]) -> list[EmployeeRecord]:
    """Return records ordered most senior first, then by last name."""
    return sorted(
        records,
        key=lambda record: (record.position.hierarchy_level, record.last_name),
    )


def group_by_position(
    records: Iterable[EmployeeRecord],
) -> dict[Position, list[EmployeeRecord]]:
    """Partition records by position.

    Positions without employees are absent from the result.
    """
    groups: dict[Position, list[EmployeeRecord]] = {}
    for record in records:
        groups.setdefault(record.position, []).append(record)
    return groups


def count_by_position(records: Iterable[EmployeeRecord]) -> dict[Position, int]:
    """Count employees per position, omitting empty positions."""
    return {
        position: len(members) for position, members in group_by_position(records).items()
    }


def average_salary(records: Iterable[EmployeeRecord]) -> float:
    """Return the mean salary, or 0.0 for no records."""
    salaries = [record.salary for record in records]
    if not salaries:
        return 0.0
    return sum(salaries) / len(salaries)


def average_salary_for_company(records: Iterable[EmployeeRecord], company: str) -> float:
    """Return the mean salary within one company, or 0.0 if it has no employees.

    Raises:
        RosterQueryError: If company name is blank.
    """
    return average_salary(filter_by_company(records, company))


def max_salary_for_company(records: Iterable[EmployeeRecord], company: str) -> float:
    """Return the highest salary within one company, or 0.0 if it has no employees.

    Raises:
        RosterQueryError: If company name is blank.
    """
    salaries = [record.salary for record in filter_by_company(records, company)]
    return max(salaries, default=0.0)


def highest_paid(records: Iterable[EmployeeRecord]) -> EmployeeRecord | None:
    """Return the employee with the highest salary.

    Ties resolve to the first record in input order.

    Returns:
        Top earner, or None for no records.
    """
    return max(records, key=lambda record: record.salary, default=None)


def below_base_salary(records: Iterable[EmployeeRecord]) -> list[EmployeeRecord]:
    """Return records paid strictly less than their position's base salary."""
    return [record for record in records if record.salary < record.position.base_salary]


def company_statistics(records: Iterable[EmployeeRecord]) -> dict[str, CompanyStatistics]:
    """Compute statistics for each company present in the records.

    Args:
        records: Record snapshot.

    Returns:
        Statistics keyed by company name, in first-seen order.
    """
    by_company: dict[str, list[EmployeeRecord]] = {}
    for record in records:
        by_company.setdefault(record.company, []).append(record)
    return {
        company: _build_company_statistics(members)
        for company, members in by_company.items()
    }


def status_distribution(records: Iterable[EmployeeRecord]) -> dict[str, int]:
    """Count employees per status name; unset statuses count as ACTIVE."""
    distribution: dict[str, int] = {}
    for record in records:
        status_name = record.effective_status.name
        distribution[status_name] = distribution.get(status_name, 0) + 1
    return distribution


def _build_company_statistics(members: Sequence[EmployeeRecord]) -> CompanyStatistics:
    """Summarize one company's employees."""
    top_earner = highest_paid(members)
    return CompanyStatistics(
        employee_count=len(members),
        average_salary=average_salary(members),
        highest_paid_employee=top_earner.full_name if top_earner else NO_TOP_EARNER_LABEL,
        highest_salary=top_earner.salary if top_earner else 0.0,
    )
