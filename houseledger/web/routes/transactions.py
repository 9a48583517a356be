"""API routes for transactions."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from houseledger.core.database import get_db
from houseledger.core.schemas import Page, PageParams
from houseledger.domain.finance.schemas import CreateTransactionRequest, TransactionOut
from houseledger.domain.finance.services import TransactionService
from houseledger.domain.finance.transactions import SqlAlchemyTransactionStore, create_transaction
from houseledger.web.errors import ValidationProblemDetails
from houseledger.web.routes.crud import not_found, service_dependency

router = APIRouter()

get_service = service_dependency(TransactionService)


def page_params(
    page: int = Query(1),
    page_size: Optional[int] = Query(None, alias="pageSize"),
) -> PageParams:
    if page_size is None:
        return PageParams(page=page)
    return PageParams(page=page, page_size=page_size)


@router.post(
    "",
    response_model=TransactionOut,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationProblemDetails},
    },
)
async def create(
    payload: CreateTransactionRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> TransactionOut:
    """Create a transaction after validation, account check and dedup."""
    transaction = await create_transaction(payload, SqlAlchemyTransactionStore(db))
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{transaction.id}"
    return transaction


@router.get("/recent", response_model=Page[TransactionOut])
async def list_recent(
    params: PageParams = Depends(page_params),
    service: TransactionService = Depends(get_service),
) -> Page[TransactionOut]:
    return await service.get_recent(params)


@router.get("/account/{account_id}", response_model=Page[TransactionOut])
async def list_by_account(
    account_id: int,
    from_date: Optional[datetime] = Query(None, alias="fromDate"),
    to_date: Optional[datetime] = Query(None, alias="toDate"),
    params: PageParams = Depends(page_params),
    service: TransactionService = Depends(get_service),
) -> Page[TransactionOut]:
    return await service.get_by_account(account_id, params, from_date=from_date, to_date=to_date)


@router.get("/{transaction_id:int}", response_model=TransactionOut)
async def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_service),
):
    transaction = await service.get_by_id(transaction_id)
    if transaction is None:
        raise not_found("Transaction", transaction_id)
    return transaction


@router.delete("/{transaction_id:int}/soft", status_code=status.HTTP_204_NO_CONTENT)
async def soft_delete(
    transaction_id: int,
    service: TransactionService = Depends(get_service),
) -> Response:
    if not await service.soft_delete(transaction_id):
        raise not_found("Transaction", transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{transaction_id:int}/hard", status_code=status.HTTP_204_NO_CONTENT)
async def hard_delete(
    transaction_id: int,
    service: TransactionService = Depends(get_service),
) -> Response:
    if not await service.hard_delete(transaction_id):
        raise not_found("Transaction", transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
