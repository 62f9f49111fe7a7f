"""Shared fixtures for the notification tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Set before bizhub.config is first imported.
TEST_DB_PATH = Path(tempfile.gettempdir()) / "bizhub-tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"

from bizhub.domain.errors import SendError  # noqa: E402

from tests.fakes import FakeEmailSender, FakeRecordStore  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def make_store() -> Callable[..., FakeRecordStore]:
    return FakeRecordStore


@pytest.fixture
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture
def failing_email_sender() -> FakeEmailSender:
    return FakeEmailSender(error=SendError("SendGrid API responded with status 500"))
