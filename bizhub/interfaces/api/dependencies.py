"""FastAPI dependency utilities."""

from bizhub.infrastructure.email import SendGridEmailSender
from bizhub.infrastructure.record_store import RecordStore, SqlAlchemyRecordStore


def get_record_store() -> RecordStore:
    """Return the record store used to persist notifications."""

    return SqlAlchemyRecordStore()


def get_email_sender() -> SendGridEmailSender:
    """Return the email sender configured from the application settings."""

    return SendGridEmailSender.from_settings()
