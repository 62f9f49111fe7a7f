"""Tests for the SQLAlchemy backed record store and repositories."""

from __future__ import annotations

import threading

import anyio
import pytest
from sqlalchemy.orm import sessionmaker

from bizhub.application.use_cases.notifications import dispatch_many, write_notification
from bizhub.domain.entities import NotificationPriority, Recipient
from bizhub.domain.errors import StoreError, WriteError
from bizhub.infrastructure.database import build_engine, initialize_database
from bizhub.infrastructure.models import EmployeeModel, NotificationModel
from bizhub.infrastructure.record_store import SqlAlchemyRecordStore
from bizhub.infrastructure.repositories import EmployeeRepository, NotificationRepository

pytestmark = pytest.mark.anyio

NOTIFICATION_FIELDS = {
    "organisation_id": "org-1",
    "recipient_id": "emp-1",
    "type": "payroll",
    "title": "Payslip ready",
    "message": "Your payslip for March is ready.",
    "priority": "normal",
    "is_read": False,
}


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'store.db'}")
    initialize_database(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def unmigrated_session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


async def test_create_returns_stored_columns(session_factory):
    store = SqlAlchemyRecordStore(session_factory)

    record = await store.create("Notification", NOTIFICATION_FIELDS)

    assert record["id"] is not None
    assert record["is_read"] is False
    assert record["created_at"] is not None
    assert record["link"] is None


async def test_unknown_entity_type_raises_store_error(session_factory):
    store = SqlAlchemyRecordStore(session_factory)

    with pytest.raises(StoreError, match="Unknown entity type"):
        await store.create("Invoice", {"amount": 10})


async def test_unknown_field_raises_store_error(session_factory):
    store = SqlAlchemyRecordStore(session_factory)

    with pytest.raises(StoreError):
        await store.create("Notification", {"colour": "red"})


async def test_database_failure_becomes_write_error(unmigrated_session_factory):
    store = SqlAlchemyRecordStore(unmigrated_session_factory)

    with pytest.raises(WriteError) as excinfo:
        await write_notification(
            store,
            organisation_id="org-1",
            recipient_id="emp-1",
            recipient_email=None,
            type="payroll",
            title="Payslip",
            message="Ready",
        )

    assert isinstance(excinfo.value.__cause__, StoreError)


async def test_written_notification_round_trips_through_repository(session_factory):
    store = SqlAlchemyRecordStore(session_factory)

    written = await write_notification(
        store,
        organisation_id="org-1",
        recipient_id="emp-1",
        recipient_email="emp1@example.com",
        type="expense",
        title="Expense Pending Approval",
        message="Fatmata submitted an expense of Le 150,000.",
        link="/ExpenseManagement",
        priority="high",
    )

    with session_factory() as session:
        stored = NotificationRepository(session).list_for_recipient("org-1", "emp-1")

    assert len(stored) == 1
    notification = stored[0]
    assert notification.id == written.id
    assert notification.recipient_email == "emp1@example.com"
    assert notification.title == "Expense Pending Approval"
    assert notification.message == "Fatmata submitted an expense of Le 150,000."
    assert notification.link == "/ExpenseManagement"
    assert notification.priority is NotificationPriority.HIGH
    assert notification.is_read is False


async def test_concurrent_dispatch_persists_every_record(session_factory):
    store = SqlAlchemyRecordStore(session_factory)
    recipients = [Recipient(id=f"emp-{index}") for index in range(10)]

    report = await dispatch_many(
        store,
        organisation_id="org-1",
        recipients=recipients,
        type="announcement",
        title="Office closed",
        message="The office is closed on Friday.",
    )

    assert report.ok
    with session_factory() as session:
        assert NotificationRepository(session).count_for_organisation("org-1") == 10


def test_list_for_recipient_filters_unread(session_factory):
    with session_factory() as session:
        session.add_all(
            [
                NotificationModel(**{**NOTIFICATION_FIELDS, "title": "unread"}),
                NotificationModel(**{**NOTIFICATION_FIELDS, "title": "read", "is_read": True}),
                NotificationModel(**{**NOTIFICATION_FIELDS, "recipient_id": "emp-2"}),
            ]
        )
        session.commit()

        repository = NotificationRepository(session)
        everything = repository.list_for_recipient("org-1", "emp-1")
        unread = repository.list_for_recipient("org-1", "emp-1", unread_only=True)

    assert {notification.title for notification in everything} == {"unread", "read"}
    assert [notification.title for notification in unread] == ["unread"]


def test_employee_repository_returns_active_directory_entries(session_factory):
    with session_factory() as session:
        session.add_all(
            [
                EmployeeModel(
                    id="1", organisation_id="org-1", role="org_admin",
                    email="a@x.com", user_email="a.login@x.com", full_name="Abu",
                ),
                EmployeeModel(
                    id="2", organisation_id="org-1", role="hr_admin", status="inactive",
                ),
                EmployeeModel(id="3", organisation_id="org-2", role="org_admin"),
            ]
        )
        session.commit()

        directory = EmployeeRepository(session).list_for_organisation("org-1")
        everyone = EmployeeRepository(session).list_for_organisation(
            "org-1", active_only=False
        )

    assert [entry.id for entry in directory] == ["1"]
    assert directory[0].contact_address() == "a.login@x.com"
    assert directory[0].full_name == "Abu"
    assert [entry.id for entry in everyone] == ["1", "2"]


class _NullSession:
    def add(self, model):
        pass

    def commit(self):
        pass

    def refresh(self, model):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


async def test_large_fan_out_is_not_capped_by_the_shared_thread_pool():
    writers = 60
    barrier = threading.Barrier(writers, timeout=5)

    def session_factory():
        # Every write holds its thread until all of them are running at once.
        barrier.wait()
        return _NullSession()

    store = SqlAlchemyRecordStore(session_factory)
    recipients = [Recipient(id=f"emp-{index}") for index in range(writers)]

    with anyio.fail_after(10):
        report = await dispatch_many(
            store,
            organisation_id="org-1",
            recipients=recipients,
            type="announcement",
            title="Town hall",
            message="All staff meeting at noon.",
        )

    assert report.ok
    assert len(report) == writers
