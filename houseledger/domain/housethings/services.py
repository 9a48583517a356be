from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from houseledger.core.crud import CrudService
from houseledger.domain.housethings.models import HouseThing, Room
from houseledger.domain.housethings.schemas import HouseThingCreate

logger = logging.getLogger(__name__)


class RoomService(CrudService[Room]):
    model = Room
    label = "room"

    def ordering(self):
        return (Room.name,)


class HouseThingService(CrudService[HouseThing]):
    model = HouseThing
    label = "house thing"

    def ordering(self):
        return (HouseThing.purchase_date.desc(), HouseThing.id.desc())

    def load_options(self):
        return (selectinload(HouseThing.room),)

    async def create(self, payload: HouseThingCreate) -> HouseThing:
        if payload.history_id is not None:
            return await super().create(payload)

        logger.info("Creating new %s with a new history chain", self.label)
        item = self.build(payload)
        # placeholder until the row id is known
        item.history_id = 0
        self.db.add(item)
        try:
            await self.db.flush()
        except IntegrityError:
            raise await self._constraint_violation("create") from None
        # bulk UPDATE keeps the row out of the dirty set so the audit stamps stay equal
        await self.db.execute(
            update(HouseThing)
            .where(HouseThing.id == item.id)
            .values(history_id=item.id)
            .execution_options(synchronize_session=False)
        )
        await self._commit("create")
        logger.info("House thing created successfully with ID: %s", item.id)
        return await self._reload(item.id)

    async def get_by_room(self, room_id: int) -> list[HouseThing]:
        logger.debug("Getting house things for room: %s", room_id)
        return await self._list(self._active().where(HouseThing.room_id == room_id))

    async def get_history(self, history_id: int) -> list[HouseThing]:
        """Every version in a chain, including the deactivated ones."""
        logger.debug("Getting house thing history: %s", history_id)
        return await self._list(self._select().where(HouseThing.history_id == history_id))

    async def renew(self, item_id: int, payload: HouseThingCreate) -> Optional[HouseThing]:
        """Replace a thing with a new version in the same history chain."""
        logger.info("Renewing house thing with ID: %s", item_id)
        current = await self._get_any(item_id)
        if current is None:
            logger.warning("House thing with ID %s not found", item_id)
            return None

        data = payload.model_dump(exclude_unset=True)
        data["history_id"] = current.history_id
        renewed = HouseThing(**data)

        current.is_active = False
        self.db.add(renewed)
        await self._commit("renew")
        logger.info(
            "House thing %s renewed as %s (history %s)", item_id, renewed.id, renewed.history_id
        )
        return await self._reload(renewed.id)


__all__ = ["HouseThingService", "RoomService"]
