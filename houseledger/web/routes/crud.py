"""Router factory for the uniform CRUD surface shared by every entity."""
import logging
from typing import Callable, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from houseledger.core.crud import CrudService
from houseledger.core.database import get_db

logger = logging.getLogger(__name__)


def service_dependency(service_class: Type[CrudService]) -> Callable[..., CrudService]:
    """FastAPI dependency building ``service_class`` on the request session."""

    def get_service(db: AsyncSession = Depends(get_db)) -> CrudService:
        return service_class(db)

    return get_service


def not_found(label: str, item_id) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{label} with ID {item_id} not found",
    )


def build_crud_router(
    service_class: Type[CrudService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    label: str,
    include_inactive: bool = False,
) -> APIRouter:
    """Return a router exposing list/get/create/update/soft delete/hard delete.

    ``include_inactive`` adds an ``includeInactive`` query flag to the list
    route for services whose ``get_all`` accepts it.
    """
    router = APIRouter()
    get_service = service_dependency(service_class)

    if include_inactive:

        @router.get("", response_model=list[out_schema])
        async def list_items(
            include_inactive: bool = Query(False, alias="includeInactive"),
            service: CrudService = Depends(get_service),
        ):
            return await service.get_all(include_inactive=include_inactive)

    else:

        @router.get("", response_model=list[out_schema])
        async def list_items(service: CrudService = Depends(get_service)):
            return await service.get_all()

    @router.get("/{item_id:int}", response_model=out_schema)
    async def get_item(item_id: int, service: CrudService = Depends(get_service)):
        item = await service.get_by_id(item_id)
        if item is None:
            raise not_found(label, item_id)
        return item

    @router.post("", response_model=out_schema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: create_schema,
        request: Request,
        response: Response,
        service: CrudService = Depends(get_service),
    ):
        item = await service.create(payload)
        response.headers["Location"] = f"{request.url.path.rstrip('/')}/{item.id}"
        return item

    @router.put("/{item_id:int}", response_model=out_schema)
    async def update_item(
        item_id: int,
        payload: update_schema,
        service: CrudService = Depends(get_service),
    ):
        item = await service.update(item_id, payload)
        if item is None:
            raise not_found(label, item_id)
        return item

    @router.delete("/{item_id:int}/soft", status_code=status.HTTP_204_NO_CONTENT)
    async def soft_delete_item(item_id: int, service: CrudService = Depends(get_service)) -> Response:
        if not await service.soft_delete(item_id):
            raise not_found(label, item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{item_id:int}/hard", status_code=status.HTTP_204_NO_CONTENT)
    async def hard_delete_item(item_id: int, service: CrudService = Depends(get_service)) -> Response:
        if not await service.hard_delete(item_id):
            raise not_found(label, item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["build_crud_router", "not_found", "service_dependency"]
