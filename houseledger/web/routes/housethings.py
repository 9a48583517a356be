"""API routes for rooms and house things."""
from fastapi import Depends, Request, Response, status

from houseledger.domain.housethings.schemas import (
    HouseThingCreate,
    HouseThingOut,
    HouseThingUpdate,
    RoomCreate,
    RoomOut,
    RoomUpdate,
)
from houseledger.domain.housethings.services import HouseThingService, RoomService
from houseledger.web.routes.crud import build_crud_router, not_found, service_dependency

rooms_router = build_crud_router(RoomService, RoomCreate, RoomUpdate, RoomOut, label="Room")

house_things_router = build_crud_router(
    HouseThingService, HouseThingCreate, HouseThingUpdate, HouseThingOut, label="House thing"
)


@house_things_router.get("/room/{room_id}", response_model=list[HouseThingOut])
async def list_house_things_by_room(
    room_id: int,
    service: HouseThingService = Depends(service_dependency(HouseThingService)),
):
    return await service.get_by_room(room_id)


@house_things_router.get("/history/{history_id}", response_model=list[HouseThingOut])
async def get_house_thing_history(
    history_id: int,
    service: HouseThingService = Depends(service_dependency(HouseThingService)),
):
    """Every version of a thing, newest purchase first, including replaced ones."""
    return await service.get_history(history_id)


@house_things_router.post(
    "/{item_id:int}/renew",
    response_model=HouseThingOut,
    status_code=status.HTTP_201_CREATED,
)
async def renew_house_thing(
    item_id: int,
    payload: HouseThingCreate,
    request: Request,
    response: Response,
    service: HouseThingService = Depends(service_dependency(HouseThingService)),
):
    """Deactivate a thing and record its replacement in the same history chain."""
    renewed = await service.renew(item_id, payload)
    if renewed is None:
        raise not_found("House thing", item_id)
    prefix = request.url.path.rsplit("/", 2)[0]
    response.headers["Location"] = f"{prefix}/{renewed.id}"
    return renewed
