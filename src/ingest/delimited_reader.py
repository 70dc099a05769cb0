"""Comma-delimited employee source parsing.

This module splits CSV text into numbered data lines and fields.
Quoting is not supported: every comma separates two fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from core.constants import CSV_DELIMITER, CSV_FIELD_COUNT, CSV_FIELD_NAMES, CSV_HEADER_LINE_COUNT
from core.errors import StructuralParseError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class DelimitedLine:
    """One non-blank data line of a delimited source.

    Attributes:
        line_number: One-based line number in the source, header included.
        text: Raw line text without its line terminator.
    """

    line_number: int
    text: str


def iter_data_lines(text: str) -> Iterator[DelimitedLine]:
    """Yield data lines after the header, skipping blank lines.

    Args:
        text: Full source text.

    Yields:
        Numbered data lines in source order.
    """
    for line_number, line in enumerate(split_lines(text), 1):
        if line_number <= CSV_HEADER_LINE_COUNT:
            continue
        if not line.strip():
            continue
        yield DelimitedLine(line_number=line_number, text=line)


def split_fields(line: str) -> dict[str, str]:
    """Split one data line into named, trimmed fields.

    Args:
        line: Raw data line.

    Returns:
        Field tokens keyed by field name.

    Raises:
        StructuralParseError: If the line does not hold exactly six fields.
    """
    parts = line.split(CSV_DELIMITER)
    if len(parts) != CSV_FIELD_COUNT:
        raise StructuralParseError(
            f"Invalid number of fields: expected {CSV_FIELD_COUNT}, got {len(parts)}"
        )
    return {name: part.strip() for name, part in zip(CSV_FIELD_NAMES, parts)}


def split_lines(text: str) -> list[str]:
    """Split text at ``\\n``, ``\\r`` and ``\\r\\n`` only.

    Other Unicode separators such as ``\\u2028`` stay inside the line.
    """
    lines = _LINE_BREAK.split(text)
    if lines and not lines[-1]:
        lines.pop()
    return lines
