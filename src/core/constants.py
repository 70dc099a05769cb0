"""Core constants used across Roster modules.

This module centralizes source layouts, defaults, and message templates.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_SOURCE_ENCODING = "utf-8"
DEFAULT_XML_RECORD_TAG = "employee"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SUPPORTED_SOURCE_FORMATS = ("auto", "csv", "xml")
XML_FILE_SUFFIXES = (".xml",)

CSV_DELIMITER = ","
CSV_FIELD_NAMES = ("first_name", "last_name", "email", "company", "position", "salary")
CSV_FIELD_COUNT = len(CSV_FIELD_NAMES)
CSV_HEADER_LINE_COUNT = 1
CSV_REPORT_HEADER = ("First Name", "Last Name", "Email", "Company", "Position", "Salary")

XML_FIELD_TAGS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "company": "company",
    "position": "position",
    "salary": "salary",
}

SOURCE_LEVEL_POSITION = 0
ERROR_LINE_TEMPLATE = "Line {position}: {message}"
CSV_READ_ERROR_PREFIX = "Error reading file"
XML_READ_ERROR_PREFIX = "Error reading XML file"
NO_TOP_EARNER_LABEL = "None"
