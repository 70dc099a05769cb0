"""Import source loading.

This module reads whole import sources from local paths or open streams.
Any failure to open, read, or decode a source surfaces as SourceReadError.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Union

from core.errors import SourceReadError

ImportSource = Union[str, os.PathLike, IO[str], IO[bytes]]


def read_source_payload(source: ImportSource) -> str | bytes:
    """Read the full, undecoded content of a source.

    Args:
        source: Local file path or readable stream.

    Returns:
        Raw bytes for paths and binary streams, text for text streams.

    Raises:
        SourceReadError: If the source cannot be opened or read.
    """
    if _is_stream(source):
        try:
            return source.read()  # type: ignore[union-attr]
        except (OSError, ValueError) as error:
            raise SourceReadError(str(error)) from error
    source_path = _as_path(source)
    try:
        return source_path.read_bytes()
    except OSError as error:
        raise SourceReadError(_describe_os_error(error, source_path)) from error


def read_source_text(source: ImportSource, encoding: str) -> str:
    """Read and decode the full content of a source.

    Args:
        source: Local file path or readable stream.
        encoding: Codec used when the source yields bytes.

    Returns:
        Decoded source text.

    Raises:
        SourceReadError: If the source cannot be read or decoded.
    """
    payload = read_source_payload(source)
    if isinstance(payload, str):
        return payload
    try:
        return payload.decode(encoding)
    except UnicodeDecodeError as error:
        raise SourceReadError(
            f"{describe_source(source)} is not valid {encoding} text: {error.reason}"
        ) from error


def describe_source(source: ImportSource) -> str:
    """Return a human-readable label for a source."""
    if _is_stream(source):
        return str(getattr(source, "name", "<stream>"))
    return str(os.fspath(source))  # type: ignore[arg-type]


def source_suffix(source: ImportSource) -> str:
    """Return the lowercase file suffix of a source, empty for unnamed streams."""
    return Path(describe_source(source)).suffix.lower()


def _is_stream(source: object) -> bool:
    return hasattr(source, "read")


def _as_path(source: ImportSource) -> Path:
    try:
        return Path(os.fspath(source)).expanduser()  # type: ignore[arg-type]
    except TypeError as error:
        raise SourceReadError(
            f"Unsupported source type {type(source).__name__}: "
            "provide a file path or a readable stream."
        ) from error


def _describe_os_error(error: OSError, source_path: Path) -> str:
    reason = error.strerror or str(error)
    return f"{source_path}: {reason}"
