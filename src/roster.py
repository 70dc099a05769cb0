"""Public SDK surface for Roster.

This module provides a stable import path for roster users.
It re-exports the primary client, registry, importer, and typed models.
"""

from __future__ import annotations

from analytics.aggregation import (
    average_salary,
    average_salary_for_company,
    below_base_salary,
    company_statistics,
    count_by_position,
    group_by_position,
    highest_paid,
    max_salary_for_company,
    sort_by_last_name,
    sort_by_seniority,
    status_distribution,
)
from core.config import RosterConfig
from core.errors import DuplicateIdentityError, InvalidRecordError, RosterError
from core.types import (
    CompanyStatistics,
    EmployeeRecord,
    EmploymentStatus,
    ImportOutcome,
    ImportSummary,
    Position,
)
from ingest.importer import EmployeeImporter
from store.registry import EmployeeRegistry
from store.roster_sdk import RosterClient

__all__ = [
    "CompanyStatistics",
    "DuplicateIdentityError",
    "EmployeeImporter",
    "EmployeeRecord",
    "EmployeeRegistry",
    "EmploymentStatus",
    "ImportOutcome",
    "ImportSummary",
    "InvalidRecordError",
    "Position",
    "RosterClient",
    "RosterConfig",
    "RosterError",
    "average_salary",
    "average_salary_for_company",
    "below_base_salary",
    "company_statistics",
    "count_by_position",
    "group_by_position",
    "highest_paid",
    "max_salary_for_company",
    "sort_by_last_name",
    "sort_by_seniority",
    "status_distribution",
]
