"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RosterConfig
from core.errors import RosterConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to defaults when variables are unset."""
    monkeypatch.delenv("ROSTER_SOURCE_ENCODING", raising=False)
    monkeypatch.delenv("ROSTER_XML_RECORD_TAG", raising=False)
    monkeypatch.delenv("ROSTER_LOG_LEVEL", raising=False)

    config = RosterConfig.from_env()

    assert config == RosterConfig(source_encoding="utf-8", xml_record_tag="employee")


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should normalize encoding, tag, and level from environment."""
    monkeypatch.setenv("ROSTER_SOURCE_ENCODING", "latin-1")
    monkeypatch.setenv("ROSTER_XML_RECORD_TAG", " worker ")
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "debug")

    config = RosterConfig.from_env()

    assert (config.source_encoding, config.xml_record_tag, config.log_level) == (
        "iso8859-1",
        "worker",
        "DEBUG",
    )


def test_from_env_raises_for_unknown_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unknown codec name."""
    monkeypatch.setenv("ROSTER_SOURCE_ENCODING", "not-a-codec")

    with pytest.raises(RosterConfigError):
        RosterConfig.from_env()


def test_from_env_raises_for_blank_record_tag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a blank XML record tag."""
    monkeypatch.setenv("ROSTER_XML_RECORD_TAG", "  ")

    with pytest.raises(RosterConfigError):
        RosterConfig.from_env()


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported log levels."""
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "verbose")

    with pytest.raises(RosterConfigError):
        RosterConfig.from_env()
