"""Generic query/command service shared by every audited entity.

Each bounded context subclasses :class:`CrudService`, pointing it at a model
and a default ordering, and adds whatever extra reads the entity needs. The
contract is the same everywhere:

* ``get_by_id`` / ``get_all`` only see active rows;
* ``create`` inserts a row (audit fields are stamped by the flush hook);
* ``update`` overwrites only the fields present in the payload;
* ``soft_delete`` flips ``is_active`` and is safe to repeat;
* ``hard_delete`` removes the row for good.

Missing ids are reported as ``None``/``False`` rather than raised.
"""
from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from houseledger.core.errors import ConstraintViolation, DependencyError

ModelT = TypeVar("ModelT")

logger = logging.getLogger(__name__)


class CrudService(Generic[ModelT]):
    """Uniform CRUD operations over one audited model."""

    model: ClassVar[type]
    label: ClassVar[str] = "entity"

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # -- query hooks -------------------------------------------------------

    def ordering(self) -> Sequence[Any]:
        """Columns used to sort list results."""
        return (self.model.id,)

    def load_options(self) -> Sequence[Any]:
        """Loader options applied to every read (eager relationships)."""
        return ()

    def _select(self) -> Select:
        return select(self.model).options(*self.load_options())

    def _active(self) -> Select:
        return self._select().where(self.model.is_active.is_(True))

    async def _list(self, stmt: Select) -> list[ModelT]:
        result = await self.db.execute(stmt.order_by(*self.ordering()))
        return list(result.scalars().all())

    async def _get_any(self, item_id: int) -> Optional[ModelT]:
        result = await self.db.execute(self._select().where(self.model.id == item_id))
        return result.scalar_one_or_none()

    async def _reload(self, item_id: int) -> ModelT:
        result = await self.db.execute(
            self._select()
            .where(self.model.id == item_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def _constraint_violation(self, action: str) -> ConstraintViolation:
        """Roll back a failed write and describe it as a ``ConstraintViolation``."""
        await self.db.rollback()
        logger.warning("IntegrityError while trying to %s %s", action, self.label, exc_info=True)
        return ConstraintViolation(
            f"Cannot {action} {self.label}: a referenced record does not exist "
            "or a required value is missing."
        )

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError:
            raise await self._constraint_violation(action) from None

    # -- queries -----------------------------------------------------------

    async def get_by_id(self, item_id: int) -> Optional[ModelT]:
        logger.debug("Getting %s by ID: %s", self.label, item_id)
        result = await self.db.execute(self._active().where(self.model.id == item_id))
        item = result.scalar_one_or_none()
        if item is None:
            logger.warning("%s not found: %s", self.label.capitalize(), item_id)
        return item

    async def get_all(self) -> list[ModelT]:
        logger.debug("Getting all active %s rows", self.label)
        items = await self._list(self._active())
        logger.info("Found %d active %s rows", len(items), self.label)
        return items

    # -- commands ----------------------------------------------------------

    def build(self, payload: BaseModel) -> ModelT:
        """Construct a new model instance from a create payload."""
        return self.model(**payload.model_dump(exclude_unset=True))

    async def create(self, payload: BaseModel) -> ModelT:
        logger.info("Creating new %s", self.label)
        item = self.build(payload)
        self.db.add(item)
        await self._commit("create")
        logger.info("%s created successfully with ID: %s", self.label.capitalize(), item.id)
        return await self._reload(item.id)

    async def update(self, item_id: int, payload: BaseModel) -> Optional[ModelT]:
        logger.info("Updating %s with ID: %s", self.label, item_id)
        item = await self._get_any(item_id)
        if item is None:
            logger.warning("%s with ID %s not found", self.label.capitalize(), item_id)
            return None

        update_data = payload.model_dump(exclude_unset=True)
        if not update_data:
            return item

        for field, value in update_data.items():
            setattr(item, field, value)

        await self._commit("update")
        logger.info("%s with ID %s updated successfully", self.label.capitalize(), item_id)
        return await self._reload(item_id)

    async def soft_delete(self, item_id: int) -> bool:
        logger.info("Soft deleting %s with ID: %s", self.label, item_id)
        item = await self._get_any(item_id)
        if item is None:
            logger.warning("%s with ID %s not found", self.label.capitalize(), item_id)
            return False

        item.is_active = False
        await self.db.commit()
        logger.info("%s with ID %s soft deleted successfully", self.label.capitalize(), item_id)
        return True

    async def hard_delete(self, item_id: int) -> bool:
        logger.warning("Hard deleting %s with ID: %s", self.label, item_id)
        item = await self._get_any(item_id)
        if item is None:
            logger.warning("%s with ID %s not found", self.label.capitalize(), item_id)
            return False

        await self.db.delete(item)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "IntegrityError while hard deleting %s %s", self.label, item_id, exc_info=True
            )
            raise DependencyError(
                f"Cannot delete {self.label} {item_id}: other records still reference it."
            ) from None

        logger.warning("%s with ID %s hard deleted permanently", self.label.capitalize(), item_id)
        return True


__all__ = ["CrudService"]
