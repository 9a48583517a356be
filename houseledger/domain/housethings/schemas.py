"""Pydantic schemas for rooms and house things."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from houseledger.core.schemas import AuditedOut, RequestModel, reject_null


class RoomCreate(RequestModel):
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    note: Optional[str] = None


class RoomUpdate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    note: Optional[str] = None

    required_name = field_validator("name", mode="before")(reject_null)


class RoomOut(AuditedOut):
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class HouseThingCreate(RequestModel):
    """Used both to create a thing and to renew an existing one."""

    name: str
    description: Optional[str] = None
    item_type: Optional[str] = None
    model: Optional[str] = None
    cost: Decimal = Field(default=Decimal("0"), ge=0)
    history_id: Optional[int] = Field(default=None, gt=0)
    purchase_date: datetime
    room_id: Optional[int] = None
    note: Optional[str] = None


class HouseThingUpdate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    item_type: Optional[str] = None
    model: Optional[str] = None
    cost: Optional[Decimal] = Field(default=None, ge=0)
    purchase_date: Optional[datetime] = None
    room_id: Optional[int] = None
    note: Optional[str] = None

    required_fields = field_validator("name", "cost", "purchase_date", mode="before")(reject_null)


class HouseThingOut(AuditedOut):
    name: str
    description: Optional[str] = None
    item_type: Optional[str] = None
    model: Optional[str] = None
    cost: Decimal
    history_id: int
    purchase_date: datetime
    room_id: Optional[int] = None
    room_name: Optional[str] = None
