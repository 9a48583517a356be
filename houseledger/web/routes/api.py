"""Aggregate router for the versioned JSON API."""
from fastapi import APIRouter

from houseledger.web.routes import ancillary, finance, housethings, salary, transactions

router = APIRouter()

router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
router.include_router(finance.accounts_router, prefix="/accounts", tags=["accounts"])
router.include_router(finance.banks_router, prefix="/banks", tags=["banks"])
router.include_router(finance.balances_router, prefix="/balances", tags=["balances"])
router.include_router(ancillary.countries_router, prefix="/countries", tags=["countries"])
router.include_router(ancillary.currencies_router, prefix="/currencies", tags=["currencies"])
router.include_router(
    ancillary.rates_router, prefix="/currency-conversion-rates", tags=["currency-conversion-rates"]
)
router.include_router(ancillary.suppliers_router, prefix="/suppliers", tags=["suppliers"])
router.include_router(ancillary.service_users_router, prefix="/serviceusers", tags=["serviceusers"])
router.include_router(salary.router, prefix="/salaries", tags=["salaries"])
router.include_router(housethings.rooms_router, prefix="/rooms", tags=["rooms"])
router.include_router(housethings.house_things_router, prefix="/housethings", tags=["housethings"])
