"""SQLAlchemy model for the organisation employee directory."""

from sqlalchemy import Column, String

from bizhub.infrastructure.database import Base


class EmployeeModel(Base):
    """Employee record owned by the HR module; read-only for notifications."""

    __tablename__ = "employee"

    id = Column(String(64), primary_key=True)
    organisation_id = Column(String(64), nullable=False, index=True)
    full_name = Column(String(120), nullable=True)
    role = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    user_email = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default="active")


__all__ = ["EmployeeModel"]
