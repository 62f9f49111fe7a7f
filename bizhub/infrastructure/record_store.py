"""Generic entity record store backed by SQLAlchemy."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any, Protocol

import anyio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bizhub.domain.errors import StoreError
from bizhub.infrastructure.database import Base, SessionLocal
from bizhub.infrastructure.models import NotificationModel

logger = logging.getLogger(__name__)

ENTITY_MODELS: dict[str, type[Base]] = {
    "Notification": NotificationModel,
}

# Worker threads reserved per store, above anyio's shared default of 40.
DEFAULT_MAX_CONCURRENT_WRITES = 200


class RecordStore(Protocol):
    """Anything able to create an entity record from a mapping of fields."""

    async def create(self, entity_type: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        ...


class SqlAlchemyRecordStore:
    """Create entity records in a worker thread, one session per record."""

    def __init__(
        self,
        session_factory: Callable[[], Session] = SessionLocal,
        *,
        models: Mapping[str, type[Base]] | None = None,
        max_concurrent_writes: int = DEFAULT_MAX_CONCURRENT_WRITES,
    ) -> None:
        self._session_factory = session_factory
        self._models = dict(models or ENTITY_MODELS)
        self._max_concurrent_writes = max_concurrent_writes
        self._limiter: anyio.CapacityLimiter | None = None

    async def create(self, entity_type: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Persist a new ``entity_type`` record and return its stored columns."""

        if self._limiter is None:
            self._limiter = anyio.CapacityLimiter(self._max_concurrent_writes)
        return await anyio.to_thread.run_sync(
            partial(self._create_sync, entity_type, dict(fields)),
            limiter=self._limiter,
        )

    def _create_sync(self, entity_type: str, fields: dict[str, Any]) -> dict[str, Any]:
        model_class = self._models.get(entity_type)
        if model_class is None:
            raise StoreError(f"Unknown entity type '{entity_type}'")

        try:
            model = model_class(**fields)
        except TypeError as exc:
            raise StoreError(f"Invalid fields for {entity_type}: {exc}") from exc

        session = self._session_factory()
        try:
            session.add(model)
            session.commit()
            session.refresh(model)
            return _model_to_record(model)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.debug("Creating %s record failed", entity_type, exc_info=True)
            raise StoreError(f"Could not create {entity_type} record: {exc}") from exc
        finally:
            session.close()


def _model_to_record(model: Base) -> dict[str, Any]:
    return {column.name: getattr(model, column.name) for column in model.__table__.columns}


__all__ = [
    "DEFAULT_MAX_CONCURRENT_WRITES",
    "ENTITY_MODELS",
    "RecordStore",
    "SqlAlchemyRecordStore",
]
