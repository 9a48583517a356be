from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from houseledger.core.audit import AuditMixin
from houseledger.core.database import Base


class Room(AuditMixin, Base):
    """Room of the house that contains things."""

    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    color = Column(String(20), nullable=True)
    icon = Column(String(50), nullable=True)

    house_things = relationship("HouseThing", back_populates="room", passive_deletes="all")


class HouseThing(AuditMixin, Base):
    """Appliance or object owned by the household.

    Rows sharing a ``history_id`` are successive versions of the same thing:
    renewing a thing deactivates the current row and inserts a new one in the
    same chain.
    """

    __tablename__ = "house_things"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(String(500), nullable=True)
    item_type = Column(String(100), nullable=True)
    model = Column(String(200), nullable=True)
    cost = Column(Numeric(14, 2), nullable=False, default=0)
    history_id = Column(Integer, nullable=False, index=True)
    purchase_date = Column(DateTime, nullable=False)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=True, index=True)

    room = relationship("Room", back_populates="house_things")

    @property
    def room_name(self) -> Optional[str]:
        room = self.__dict__.get("room")
        return room.name if room is not None else None
