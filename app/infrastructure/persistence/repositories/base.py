"""Base repository: primary-key lookup, add, flush-and-refresh, and hooks."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic persistence helpers for one ORM model.

    Subclasses expose DTO-returning methods and may override the
    _on_after_create / _on_after_update hooks.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model(self, entity_id: int) -> ModelType | None:
        """Return the ORM row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new row, load server defaults, run _on_after_create."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def save(self, obj: ModelType) -> ModelType:
        """Flush changes to an attached row, reload it, run _on_after_update."""
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to emit events."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to emit events."""
