"""Python SDK for employee roster operations.

This module exposes high-level APIs for importing sources into one
registry and querying analytics over its current snapshot.
"""

from __future__ import annotations

from pathlib import Path

from analytics import aggregation
from analytics.report_export import write_csv_report
from core.config import RosterConfig
from core.types import CompanyStatistics, EmployeeRecord, ImportSummary, Position
from ingest.importer import EmployeeImporter
from ingest.source_reader import ImportSource
from store.registry import EmployeeRegistry


class RosterClient:
    """Primary SDK entry point owning one registry and its importer."""

    def __init__(
        self,
        config: RosterConfig | None = None,
        registry: EmployeeRegistry | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            registry: Optional registry to operate on; a fresh one otherwise.
        """
        self._config = config or RosterConfig.from_env()
        self._registry = registry if registry is not None else EmployeeRegistry()
        self._importer = EmployeeImporter(self._registry, self._config)

    @property
    def registry(self) -> EmployeeRegistry:
        """Registry owned by this client."""
        return self._registry

    def import_csv(self, source: ImportSource) -> ImportSummary:
        """Import a CSV source into the registry."""
        return self._importer.import_from_csv(source)

    def import_xml(self, source: ImportSource) -> ImportSummary:
        """Import an XML source into the registry."""
        return self._importer.import_from_xml(source)

    def import_file(self, source: ImportSource, source_format: str = "auto") -> ImportSummary:
        """Import a source, choosing the parser from ``source_format``.

        Raises:
            RosterIngestError: If source_format is unsupported.
        """
        return self._importer.import_from_file(source, source_format)

    def employees(self, company: str | None = None) -> list[EmployeeRecord]:
        """List employees, optionally restricted to one company.

        Raises:
            RosterQueryError: If company is given but blank.
        """
        if company is None:
            return self._registry.list_records()
        return self._registry.filter_by_company(company)

    def company_statistics(self) -> dict[str, CompanyStatistics]:
        """Compute per-company statistics over the current snapshot."""
        return aggregation.company_statistics(self._registry.list_records())

    def average_salary(self, company: str | None = None) -> float:
        """Average salary overall or within one company."""
        records = self._registry.list_records()
        if company is None:
            return aggregation.average_salary(records)
        return aggregation.average_salary_for_company(records, company)

    def highest_paid(self) -> EmployeeRecord | None:
        """Top earner of the current snapshot."""
        return aggregation.highest_paid(self._registry.list_records())

    def count_by_position(self) -> dict[Position, int]:
        """Employee counts per occupied position."""
        return aggregation.count_by_position(self._registry.list_records())

    def status_distribution(self) -> dict[str, int]:
        """Employee counts per status name."""
        return aggregation.status_distribution(self._registry.list_records())

    def below_base_salary(self) -> list[EmployeeRecord]:
        """Employees paid below their position's base salary."""
        return aggregation.below_base_salary(self._registry.list_records())

    def export_csv(self, output_path: str | Path, company: str | None = None) -> Path:
        """Write a CSV report of all employees or one company.

        Raises:
            RosterExportError: If the report cannot be written.
        """
        return write_csv_report(self.employees(company), output_path)
