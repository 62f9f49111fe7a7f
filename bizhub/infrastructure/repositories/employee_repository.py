"""Directory provider backed by the employee table."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from bizhub.domain.entities import DirectoryEntry
from bizhub.infrastructure.models import EmployeeModel

ACTIVE_STATUS = "active"


class EmployeeRepository:
    """Materialize organisation employees as :class:`DirectoryEntry` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_organisation(
        self, organisation_id: str, *, active_only: bool = True
    ) -> Sequence[DirectoryEntry]:
        query = self.session.query(EmployeeModel).filter(
            EmployeeModel.organisation_id == organisation_id
        )
        if active_only:
            query = query.filter(EmployeeModel.status == ACTIVE_STATUS)
        query = query.order_by(EmployeeModel.id)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: EmployeeModel) -> DirectoryEntry:
        return DirectoryEntry(
            id=model.id,
            role=model.role,
            email=model.email,
            user_email=model.user_email,
            full_name=model.full_name,
        )


__all__ = ["EmployeeRepository"]
