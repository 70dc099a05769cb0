"""Roster exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class RosterError(Exception):
    """Base exception for all Roster failures."""


class RosterConfigError(RosterError):
    """Raised for invalid runtime configuration."""


class InvalidRecordError(RosterError):
    """Raised when an employee record violates its invariants."""


class DuplicateIdentityError(InvalidRecordError):
    """Raised when the registry already holds a record with the same email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Duplicate email: {email}")
        self.email = email


class RosterIngestError(RosterError):
    """Raised for source parsing and import failures."""


class StructuralParseError(RosterIngestError):
    """Raised when a source unit has the wrong shape (field count, missing tag)."""


class SourceReadError(RosterIngestError):
    """Raised when an import source cannot be opened or read at all."""


class RosterQueryError(RosterError):
    """Raised for invalid registry and analytics query arguments."""


class RosterExportError(RosterError):
    """Raised for report export failures."""
