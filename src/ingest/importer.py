"""Bulk employee import orchestration.

This module feeds CSV and XML sources into an EmployeeRegistry one unit at
a time. Every unit produces an ImportOutcome; a bad unit is recorded and
skipped, so one import call never aborts part-way through its source.
"""

from __future__ import annotations

from typing import Callable, Mapping

from core.config import RosterConfig
from core.constants import (
    CSV_READ_ERROR_PREFIX,
    SOURCE_LEVEL_POSITION,
    SUPPORTED_SOURCE_FORMATS,
    XML_FILE_SUFFIXES,
    XML_READ_ERROR_PREFIX,
)
from core.errors import InvalidRecordError, RosterIngestError, SourceReadError, StructuralParseError
from core.logging_config import get_logger
from core.types import ImportOutcome, ImportSummary
from ingest.delimited_reader import iter_data_lines, split_fields
from ingest.field_parsing import build_employee_record
from ingest.source_reader import (
    ImportSource,
    describe_source,
    read_source_payload,
    read_source_text,
    source_suffix,
)
from ingest.tagged_reader import extract_fields, iter_record_elements, parse_document
from store.registry import EmployeeRegistry

_LOGGER = get_logger(__name__)

FieldReader = Callable[[], Mapping[str, str]]


class EmployeeImporter:
    """Imports employee sources into one registry."""

    def __init__(self, registry: EmployeeRegistry, config: RosterConfig | None = None) -> None:
        self._registry = registry
        self._config = config or RosterConfig()

    def import_from_csv(self, source: ImportSource) -> ImportSummary:
        """Import a comma-delimited source.

        The first line is a header and is skipped; blank lines are ignored.
        Errors are numbered by one-based source line.

        Args:
            source: File path or readable stream.

        Returns:
            Summary of imported units and per-line errors.
        """
        label = describe_source(source)
        try:
            text = read_source_text(source, self._config.source_encoding)
        except SourceReadError as error:
            return _source_failure(label, CSV_READ_ERROR_PREFIX, error)
        outcomes = [
            self._import_unit(line.line_number, lambda text=line.text: split_fields(text))
            for line in iter_data_lines(text)
        ]
        return _finish(label, "csv", outcomes)

    def import_from_xml(self, source: ImportSource) -> ImportSummary:
        """Import a tag-structured XML source.

        Every element named by ``config.xml_record_tag`` is one unit.
        Errors are numbered by one-based element index.

        Args:
            source: File path or readable stream.

        Returns:
            Summary of imported units and per-element errors.
        """
        label = describe_source(source)
        try:
            root = parse_document(read_source_payload(source))
        except SourceReadError as error:
            return _source_failure(label, XML_READ_ERROR_PREFIX, error)
        outcomes = [
            self._import_unit(item.index, lambda element=item.element: extract_fields(element))
            for item in iter_record_elements(root, self._config.xml_record_tag)
        ]
        return _finish(label, "xml", outcomes)

    def import_from_file(
        self,
        source: ImportSource,
        source_format: str = "auto",
    ) -> ImportSummary:
        """Import a source, picking the parser from its format.

        Args:
            source: File path or readable stream.
            source_format: ``csv``, ``xml``, or ``auto`` to use XML for
                ``.xml`` files and CSV otherwise.

        Returns:
            Import summary.

        Raises:
            RosterIngestError: If source_format is unsupported.
        """
        normalized_format = source_format.strip().lower()
        if normalized_format not in SUPPORTED_SOURCE_FORMATS:
            supported = ", ".join(SUPPORTED_SOURCE_FORMATS)
            raise RosterIngestError(
                f"Unsupported source format '{source_format}'. Choose one of: {supported}."
            )
        if normalized_format == "auto":
            normalized_format = "xml" if source_suffix(source) in XML_FILE_SUFFIXES else "csv"
        if normalized_format == "xml":
            return self.import_from_xml(source)
        return self.import_from_csv(source)

    def _import_unit(self, line_number: int, read_fields: FieldReader) -> ImportOutcome:
        """Parse, validate, and register one unit, capturing any failure."""
        fields: Mapping[str, str] = {}
        try:
            fields = read_fields()
            record = build_employee_record(fields)
            self._registry.add(record)
        except (StructuralParseError, InvalidRecordError) as error:
            _LOGGER.debug("import_unit_rejected", line_number=line_number, reason=str(error))
            return ImportOutcome(
                line_number=line_number,
                email=fields.get("email") or None,
                error=str(error),
            )
        return ImportOutcome(line_number=line_number, email=record.email)


def _source_failure(label: str, prefix: str, error: SourceReadError) -> ImportSummary:
    """Build a summary for a source that could not be read at all."""
    _LOGGER.warning("import_source_unreadable", source=label, reason=str(error))
    outcome = ImportOutcome(line_number=SOURCE_LEVEL_POSITION, error=f"{prefix}: {error}")
    return ImportSummary(source=label, outcomes=(outcome,))


def _finish(label: str, source_format: str, outcomes: list[ImportOutcome]) -> ImportSummary:
    """Freeze outcomes into a summary and log completion."""
    summary = ImportSummary(source=label, outcomes=tuple(outcomes))
    _LOGGER.info(
        "import_completed",
        source=label,
        source_format=source_format,
        imported_count=summary.imported_count,
        failed_count=summary.failed_count,
    )
    return summary
