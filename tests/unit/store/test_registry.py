"""Unit tests for the in-memory employee registry."""

from __future__ import annotations

import threading

import pytest

from core.errors import DuplicateIdentityError, InvalidRecordError, RosterQueryError
from core.types import EmployeeRecord, EmploymentStatus, Position
from store.registry import EmployeeRegistry


def _sample_record(email: str = "jan@firm.pl", **overrides: object) -> EmployeeRecord:
    fields: dict[str, object] = {
        "first_name": "Jan",
        "last_name": "Kowalski",
        "email": email,
        "company": "TechCorp",
        "position": Position.DEVELOPER,
        "salary": 9000.0,
    }
    fields.update(overrides)
    return EmployeeRecord(**fields)  # type: ignore[arg-type]


def test_add_stores_record(registry: EmployeeRegistry) -> None:
    """A new record should be stored and reported as added."""
    assert registry.add(_sample_record()) and len(registry) == 1


def test_add_rejects_duplicate_email_ignoring_case(registry: EmployeeRegistry) -> None:
    """Adding the same email in another case should fail and keep the original."""
    registry.add(_sample_record())

    with pytest.raises(DuplicateIdentityError, match="Duplicate email: JAN@FIRM.PL"):
        registry.add(_sample_record(email="JAN@FIRM.PL", company="DataCorp"))

    assert len(registry) == 1 and registry.list_records()[0].company == "TechCorp"


def test_add_rejects_none(registry: EmployeeRegistry) -> None:
    """A missing record should be rejected."""
    with pytest.raises(InvalidRecordError):
        registry.add(None)  # type: ignore[arg-type]


def test_find_by_email_ignores_case(registry: EmployeeRegistry) -> None:
    """Lookup should match emails case-insensitively."""
    registry.add(_sample_record())

    found = registry.find_by_email("Jan@Firm.pl")

    assert found is not None and found.first_name == "Jan"


def test_find_by_email_returns_none_when_absent(registry: EmployeeRegistry) -> None:
    """Lookup for an unknown email should return None."""
    assert registry.find_by_email("nobody@firm.pl") is None


def test_find_by_blank_email_raises(registry: EmployeeRegistry) -> None:
    """Blank email queries should be rejected."""
    with pytest.raises(RosterQueryError, match="Email cannot be blank"):
        registry.find_by_email("  ")


def test_list_records_preserves_insertion_order(registry: EmployeeRegistry) -> None:
    """Listing should follow insertion order."""
    for email in ("c@firm.pl", "a@firm.pl", "b@firm.pl"):
        registry.add(_sample_record(email=email))

    assert [record.email for record in registry.list_records()] == [
        "c@firm.pl",
        "a@firm.pl",
        "b@firm.pl",
    ]


def test_list_records_returns_independent_copy(registry: EmployeeRegistry) -> None:
    """Mutating a listing should not affect the registry."""
    registry.add(_sample_record())

    registry.list_records().clear()

    assert len(registry) == 1


def test_update_replaces_record_in_place(registry: EmployeeRegistry) -> None:
    """Update should swap the record while keeping its listing position."""
    registry.add(_sample_record(email="first@firm.pl"))
    registry.add(_sample_record(email="second@firm.pl"))

    updated = registry.update("FIRST@firm.pl", _sample_record(email="renamed@firm.pl", salary=9500))

    assert updated is not None and [record.email for record in registry] == [
        "renamed@firm.pl",
        "second@firm.pl",
    ]
    assert registry.find_by_email("first@firm.pl") is None


def test_update_returns_none_when_absent(registry: EmployeeRegistry) -> None:
    """Updating an unknown email should leave the registry unchanged."""
    registry.add(_sample_record())

    result = registry.update("nobody@firm.pl", _sample_record(email="nobody@firm.pl"))

    assert result is None and len(registry) == 1


def test_update_rejects_collision_with_other_record(registry: EmployeeRegistry) -> None:
    """Renaming onto another stored email should fail without changes."""
    registry.add(_sample_record(email="first@firm.pl"))
    registry.add(_sample_record(email="second@firm.pl"))

    with pytest.raises(DuplicateIdentityError):
        registry.update("first@firm.pl", _sample_record(email="Second@firm.pl"))

    assert [record.email for record in registry] == ["first@firm.pl", "second@firm.pl"]


def test_update_status_changes_only_status(registry: EmployeeRegistry) -> None:
    """Status updates should keep every other field."""
    registry.add(_sample_record())

    updated = registry.update_status("jan@firm.pl", EmploymentStatus.ON_LEAVE)
    stored = registry.find_by_email("jan@firm.pl")

    assert updated is not None and stored is not None
    assert (stored.status, stored.salary) == (EmploymentStatus.ON_LEAVE, 9000.0)


def test_update_status_returns_none_when_absent(registry: EmployeeRegistry) -> None:
    """Status updates for unknown emails should return None."""
    assert registry.update_status("nobody@firm.pl", EmploymentStatus.TERMINATED) is None


def test_update_status_rejects_non_status(registry: EmployeeRegistry) -> None:
    """Status updates should require an EmploymentStatus value."""
    registry.add(_sample_record())

    with pytest.raises(InvalidRecordError):
        registry.update_status("jan@firm.pl", "ACTIVE")  # type: ignore[arg-type]


def test_remove_deletes_record_ignoring_case(registry: EmployeeRegistry) -> None:
    """Removal should match emails case-insensitively."""
    registry.add(_sample_record())

    assert registry.remove("JAN@firm.pl") and "jan@firm.pl" not in registry


def test_remove_returns_false_when_absent(registry: EmployeeRegistry) -> None:
    """Removing an unknown email should report nothing removed."""
    assert registry.remove("nobody@firm.pl") is False


def test_contains_accepts_records_and_emails(registry: EmployeeRegistry) -> None:
    """Membership should work for both records and raw emails."""
    registry.add(_sample_record())

    assert _sample_record(email="JAN@firm.pl") in registry and "jan@FIRM.pl" in registry
    assert 42 not in registry


def test_filter_by_company_is_case_sensitive(registry: EmployeeRegistry) -> None:
    """Company filtering should match the exact company name."""
    registry.add(_sample_record(email="a@firm.pl", company="TechCorp"))
    registry.add(_sample_record(email="b@firm.pl", company="techcorp"))

    assert [record.email for record in registry.filter_by_company("TechCorp")] == ["a@firm.pl"]


def test_filter_by_blank_company_raises(registry: EmployeeRegistry) -> None:
    """Blank company filters should be rejected."""
    with pytest.raises(RosterQueryError, match="Company name cannot be blank"):
        registry.filter_by_company(" ")


def test_filter_by_status_selects_matching_records(registry: EmployeeRegistry) -> None:
    """Status filtering should return only matching records."""
    registry.add(_sample_record(email="a@firm.pl"))
    registry.add(_sample_record(email="b@firm.pl", status=EmploymentStatus.TERMINATED))

    terminated = registry.filter_by_status(EmploymentStatus.TERMINATED)

    assert [record.email for record in terminated] == ["b@firm.pl"]


def test_clear_removes_everything(registry: EmployeeRegistry) -> None:
    """Clearing should empty the registry."""
    registry.add(_sample_record())

    registry.clear()

    assert len(registry) == 0 and registry.list_records() == []


def test_concurrent_adds_keep_identity_unique() -> None:
    """Racing adds of one email should store exactly one record."""
    registry = EmployeeRegistry()
    failures: list[Exception] = []

    def _add(index: int) -> None:
        try:
            registry.add(_sample_record(email="Race@firm.pl", first_name=f"Worker{index}"))
        except DuplicateIdentityError as error:
            failures.append(error)

    threads = [threading.Thread(target=_add, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) == 1 and len(failures) == 7
