"""API routes for banks, accounts and balances."""
from fastapi import Depends

from houseledger.domain.finance.schemas import (
    AccountCreate,
    AccountOut,
    AccountUpdate,
    BalanceCreate,
    BalanceOut,
    BalanceUpdate,
    BankCreate,
    BankOut,
    BankUpdate,
)
from houseledger.domain.finance.services import AccountService, BalanceService, BankService
from houseledger.web.routes.crud import build_crud_router, service_dependency

banks_router = build_crud_router(BankService, BankCreate, BankUpdate, BankOut, label="Bank")

accounts_router = build_crud_router(
    AccountService, AccountCreate, AccountUpdate, AccountOut, label="Account"
)


@accounts_router.get("/bank/{bank_id}", response_model=list[AccountOut])
async def list_accounts_by_bank(
    bank_id: int,
    service: AccountService = Depends(service_dependency(AccountService)),
):
    """Return the active accounts held at a bank."""
    return await service.get_by_bank(bank_id)


balances_router = build_crud_router(
    BalanceService, BalanceCreate, BalanceUpdate, BalanceOut, label="Balance"
)


@balances_router.get("/account/{account_id}", response_model=list[BalanceOut])
async def list_balances_by_account(
    account_id: int,
    service: BalanceService = Depends(service_dependency(BalanceService)),
):
    return await service.get_by_account(account_id)
