"""Tag-structured (XML) employee source parsing.

This module parses an XML document and locates employee fields by tag
name rather than by position. Elements are numbered by their one-based
index among the record elements of the document.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator

from core.constants import XML_FIELD_TAGS
from core.errors import SourceReadError, StructuralParseError


@dataclass(frozen=True)
class TaggedElement:
    """One record element of a tagged source.

    Attributes:
        index: One-based index among record elements.
        element: Parsed XML element.
    """

    index: int
    element: ET.Element


def parse_document(payload: str | bytes) -> ET.Element:
    """Parse a full XML document.

    Args:
        payload: Raw document text or bytes.

    Returns:
        Document root element.

    Raises:
        SourceReadError: If the document is not well-formed XML.
    """
    try:
        return ET.fromstring(payload)
    except ET.ParseError as error:
        raise SourceReadError(f"malformed XML: {error}") from error


def iter_record_elements(root: ET.Element, record_tag: str) -> Iterator[TaggedElement]:
    """Yield every record element of the document in document order."""
    for index, element in enumerate(root.iter(record_tag), 1):
        yield TaggedElement(index=index, element=element)


def extract_fields(element: ET.Element) -> dict[str, str]:
    """Read required employee fields from a record element.

    Args:
        element: Record element holding one child per field.

    Returns:
        Field tokens keyed by field name.

    Raises:
        StructuralParseError: If a required tag is missing or has no text.
    """
    fields: dict[str, str] = {}
    for field_name, tag in XML_FIELD_TAGS.items():
        value = _child_text(element, tag)
        if value is None:
            raise StructuralParseError(f"Missing required field in XML element: {tag}")
        fields[field_name] = value
    return fields


def _child_text(element: ET.Element, tag: str) -> str | None:
    child = element.find(f".//{tag}")
    if child is None:
        return None
    return child.text
