"""Runtime configuration model for Roster.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SOURCE_ENCODING,
    DEFAULT_XML_RECORD_TAG,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RosterConfigError


@dataclass(frozen=True)
class RosterConfig:
    """Validated runtime configuration.

    Attributes:
        source_encoding: Text encoding used to decode byte sources.
        xml_record_tag: Element tag that marks one employee in XML sources.
        log_level: Minimum level for structured log events.
    """

    source_encoding: str = DEFAULT_SOURCE_ENCODING
    xml_record_tag: str = DEFAULT_XML_RECORD_TAG
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "RosterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RosterConfigError: If environment values are invalid.
        """
        encoding_value = os.getenv("ROSTER_SOURCE_ENCODING", DEFAULT_SOURCE_ENCODING)
        record_tag_value = os.getenv("ROSTER_XML_RECORD_TAG", DEFAULT_XML_RECORD_TAG)
        log_level_value = os.getenv("ROSTER_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            source_encoding=_parse_source_encoding(encoding_value),
            xml_record_tag=_parse_record_tag(record_tag_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_source_encoding(raw_value: str) -> str:
    """Validate the source encoding environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Canonical codec name.

    Raises:
        RosterConfigError: If the codec is unknown.
    """
    try:
        return codecs.lookup(raw_value.strip()).name
    except LookupError as error:
        raise RosterConfigError(
            "Invalid ROSTER_SOURCE_ENCODING value: "
            f"unknown codec '{raw_value}'. "
            "Set ROSTER_SOURCE_ENCODING to a Python codec name such as utf-8."
        ) from error


def _parse_record_tag(raw_value: str) -> str:
    """Validate the XML record tag environment value."""
    record_tag = raw_value.strip()
    if not record_tag:
        raise RosterConfigError(
            "Invalid ROSTER_XML_RECORD_TAG value: expected a non-blank element name."
        )
    return record_tag


def _parse_log_level(raw_value: str) -> str:
    """Validate the log level environment value."""
    log_level = raw_value.strip().upper()
    if log_level not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise RosterConfigError(
            f"Invalid ROSTER_LOG_LEVEL value: '{raw_value}'. Choose one of: {supported}."
        )
    return log_level
