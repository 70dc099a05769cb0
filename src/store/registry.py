"""In-memory employee registry.

This module owns the authoritative set of employee records. Records are
keyed by their case-normalized email so the uniqueness invariant lives in
the container, and all access is serialized with a re-entrant lock.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterator

from core.errors import DuplicateIdentityError, InvalidRecordError, RosterQueryError
from core.logging_config import get_logger
from core.types import EmployeeRecord, EmploymentStatus, normalize_email
from store.record_filtering import filter_by_company, filter_by_status

_LOGGER = get_logger(__name__)


class EmployeeRegistry:
    """Identity-keyed store of employee records.

    Duplicate adds raise ``DuplicateIdentityError``; the registry never holds
    two records whose emails match ignoring case. Reads return snapshot
    copies, so callers may aggregate while other threads write.
    """

    def __init__(self) -> None:
        self._records: dict[str, EmployeeRecord] = {}
        self._lock = threading.RLock()

    def add(self, record: EmployeeRecord) -> bool:
        """Insert a new record.

        Args:
            record: Validated employee record.

        Returns:
            True once the record is stored.

        Raises:
            InvalidRecordError: If record is missing or not an EmployeeRecord.
            DuplicateIdentityError: If a record with the same email exists.
        """
        _require_record(record)
        with self._lock:
            identity_key = record.identity_key
            if identity_key in self._records:
                raise DuplicateIdentityError(record.email)
            self._records[identity_key] = record
        _LOGGER.debug("employee_added", email=record.email, company=record.company)
        return True

    def find_by_email(self, email: str) -> EmployeeRecord | None:
        """Look up a record by email, ignoring case.

        Raises:
            RosterQueryError: If email is blank.
        """
        identity_key = _require_email(email)
        with self._lock:
            return self._records.get(identity_key)

    def update(self, email: str, new_record: EmployeeRecord) -> EmployeeRecord | None:
        """Replace the record stored at ``email`` with ``new_record``.

        The replacement may carry a different email; it takes over the
        replaced record's position in listing order.

        Args:
            email: Email of the record to replace.
            new_record: Full replacement record.

        Returns:
            The stored replacement, or None if no record existed at ``email``.

        Raises:
            RosterQueryError: If email is blank.
            InvalidRecordError: If new_record is missing.
            DuplicateIdentityError: If the new email belongs to another record.
        """
        current_key = _require_email(email)
        _require_record(new_record)
        with self._lock:
            if current_key not in self._records:
                return None
            new_key = new_record.identity_key
            if new_key != current_key and new_key in self._records:
                raise DuplicateIdentityError(new_record.email)
            self._records = {
                (new_key if key == current_key else key): (
                    new_record if key == current_key else record
                )
                for key, record in self._records.items()
            }
        _LOGGER.debug("employee_updated", email=email, new_email=new_record.email)
        return new_record

    def update_status(
        self,
        email: str,
        status: EmploymentStatus,
    ) -> EmployeeRecord | None:
        """Change only the status of the record stored at ``email``.

        Returns:
            The updated record, or None if no record exists at ``email``.

        Raises:
            RosterQueryError: If email is blank.
            InvalidRecordError: If status is not an EmploymentStatus.
        """
        identity_key = _require_email(email)
        if not isinstance(status, EmploymentStatus):
            raise InvalidRecordError(f"Invalid status: {status!r}")
        with self._lock:
            current = self._records.get(identity_key)
            if current is None:
                return None
            updated = replace(current, status=status)
            self._records[identity_key] = updated
        _LOGGER.debug("employee_status_updated", email=updated.email, status=status.name)
        return updated

    def remove(self, email: str) -> bool:
        """Remove the record stored at ``email`` if present.

        Raises:
            RosterQueryError: If email is blank.
        """
        identity_key = _require_email(email)
        with self._lock:
            removed = self._records.pop(identity_key, None)
        if removed is None:
            return False
        _LOGGER.debug("employee_removed", email=removed.email)
        return True

    def list_records(self) -> list[EmployeeRecord]:
        """Return a snapshot copy of all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def filter_by_company(self, company: str) -> list[EmployeeRecord]:
        """Return records whose company matches exactly (case-sensitive).

        Raises:
            RosterQueryError: If company name is blank.
        """
        return filter_by_company(self.list_records(), company)

    def filter_by_status(self, status: EmploymentStatus) -> list[EmployeeRecord]:
        """Return records with the given employment status."""
        return filter_by_status(self.list_records(), status)

    def clear(self) -> None:
        """Remove every record."""
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, EmployeeRecord):
            identity_key = item.identity_key
        elif isinstance(item, str):
            identity_key = normalize_email(item)
        else:
            return False
        with self._lock:
            return identity_key in self._records

    def __iter__(self) -> Iterator[EmployeeRecord]:
        return iter(self.list_records())


def _require_record(record: object) -> None:
    if record is None:
        raise InvalidRecordError("Employee record cannot be None")
    if not isinstance(record, EmployeeRecord):
        raise InvalidRecordError(f"Expected EmployeeRecord, got {type(record).__name__}")


def _require_email(email: object) -> str:
    if not isinstance(email, str) or not email.strip():
        raise RosterQueryError("Email cannot be blank")
    return normalize_email(email)
