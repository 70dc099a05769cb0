"""Employee report rendering and export.

This module renders record snapshots as CSV reports and JSON-safe
payloads. Plain CSV reports can be imported back by the CSV importer.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

from core.constants import CSV_REPORT_HEADER
from core.errors import RosterExportError
from core.logging_config import get_logger
from core.types import EmployeeRecord

_LOGGER = get_logger(__name__)


def render_csv_report(records: Iterable[EmployeeRecord]) -> str:
    """Render records as CSV text with a header row.

    Fields holding commas, quotes, or newlines are quoted.

    Args:
        records: Records to render, in output order.

    Returns:
        CSV document text.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_REPORT_HEADER)
    for record in records:
        writer.writerow(
            (
                record.first_name,
                record.last_name,
                record.email,
                record.company,
                record.position.name,
                repr(record.salary),
            )
        )
    return buffer.getvalue()


def write_csv_report(records: Iterable[EmployeeRecord], output_path: str | Path) -> Path:
    """Write a CSV report file, creating parent directories.

    Args:
        records: Records to export.
        output_path: Destination file path.

    Returns:
        Resolved path of the written report.

    Raises:
        RosterExportError: If the report cannot be written.
    """
    records = list(records)
    report_path = Path(output_path).expanduser().resolve()
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(render_csv_report(records), encoding="utf-8")
    except OSError as error:
        raise RosterExportError(
            f"Failed to write report to {report_path}: {error.strerror or error}. "
            "Choose a writable output path."
        ) from error
    _LOGGER.info("report_exported", output_path=str(report_path), record_count=len(records))
    return report_path


def employee_to_payload(record: EmployeeRecord) -> dict[str, object]:
    """Serialize a record into a JSON-safe payload."""
    return {
        "first_name": record.first_name,
        "last_name": record.last_name,
        "email": record.email,
        "company": record.company,
        "position": record.position.name,
        "salary": record.salary,
        "status": record.effective_status.name,
    }
