"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from bizhub.infrastructure.database import Base
from bizhub.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for in-app notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    organisation_id = Column(String(64), nullable=False, index=True)
    recipient_id = Column(String(64), nullable=False, index=True)
    recipient_email = Column(String(255), nullable=True)
    type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    link = Column(String(500), nullable=True)
    priority = Column(String(10), nullable=False, default="normal")
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
