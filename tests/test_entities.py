"""Tests for the notification domain entities."""

import pytest

from bizhub.domain.entities import (
    DirectoryEntry,
    DispatchOutcome,
    DispatchReport,
    NotificationPriority,
    PrivilegedRole,
    Recipient,
    is_privileged_role,
)
from bizhub.domain.errors import WriteError


@pytest.mark.parametrize(
    ("priority", "expected"),
    [
        (NotificationPriority.LOW, False),
        (NotificationPriority.NORMAL, False),
        (NotificationPriority.HIGH, True),
        (NotificationPriority.URGENT, True),
    ],
)
def test_priority_escalates_only_when_high_or_urgent(priority, expected):
    assert priority.escalates is expected


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        ("super_admin", True),
        ("org_admin", True),
        ("hr_admin", True),
        ("warehouse_manager", True),
        ("cashier", False),
        ("driver", False),
        ("accountant", False),
        ("Org_Admin", False),
        ("", False),
        (None, False),
    ],
)
def test_is_privileged_role_is_an_exact_membership_test(role, expected):
    assert is_privileged_role(role) is expected


def test_privileged_role_set_is_closed():
    assert {role.value for role in PrivilegedRole} == {
        "super_admin",
        "org_admin",
        "hr_admin",
        "warehouse_manager",
    }


@pytest.mark.parametrize(
    ("user_email", "email", "expected"),
    [
        ("login@x.com", "hr@x.com", "login@x.com"),
        (None, "hr@x.com", "hr@x.com"),
        ("", "hr@x.com", "hr@x.com"),
        ("   ", "hr@x.com", "hr@x.com"),
        (None, None, None),
        ("", "", None),
    ],
)
def test_contact_address_prefers_user_email(user_email, email, expected):
    entry = DirectoryEntry(id="1", role="org_admin", email=email, user_email=user_email)

    assert entry.contact_address() == expected
    assert entry.as_recipient() == Recipient(id="1", email=expected)


def test_dispatch_report_splits_outcomes():
    ok = DispatchOutcome(recipient=Recipient(id="1"))
    failed = DispatchOutcome(recipient=Recipient(id="2"), error=WriteError("2"))
    report = DispatchReport(outcomes=(ok, failed))

    assert len(report) == 2
    assert report.succeeded == [ok]
    assert report.failed == [failed]
    assert report.ok is False
    assert list(report) == [ok, failed]


def test_empty_dispatch_report_is_ok():
    report = DispatchReport()

    assert len(report) == 0
    assert report.ok is True
