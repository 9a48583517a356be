"""API routes for countries, currencies, conversion rates, suppliers and service users."""
from datetime import date, datetime

from fastapi import Depends

from houseledger.domain.ancillary.schemas import (
    CountryCreate,
    CountryOut,
    CountryUpdate,
    CurrencyConversionRateCreate,
    CurrencyConversionRateOut,
    CurrencyConversionRateUpdate,
    CurrencyCreate,
    CurrencyOut,
    CurrencyUpdate,
    ServiceUserCreate,
    ServiceUserOut,
    ServiceUserUpdate,
    SupplierCreate,
    SupplierOut,
    SupplierUpdate,
)
from houseledger.domain.ancillary.services import (
    CountryService,
    CurrencyConversionRateService,
    CurrencyService,
    ServiceUserService,
    SupplierService,
)
from houseledger.web.routes.crud import build_crud_router, not_found, service_dependency

countries_router = build_crud_router(
    CountryService, CountryCreate, CountryUpdate, CountryOut, label="Country"
)


@countries_router.get("/code/{code}", response_model=CountryOut)
async def get_country_by_code(
    code: str,
    service: CountryService = Depends(service_dependency(CountryService)),
):
    country = await service.get_by_code(code)
    if country is None:
        raise not_found("Country", code)
    return country


currencies_router = build_crud_router(
    CurrencyService, CurrencyCreate, CurrencyUpdate, CurrencyOut, label="Currency"
)


@currencies_router.get("/code/{code}", response_model=CurrencyOut)
async def get_currency_by_code(
    code: str,
    service: CurrencyService = Depends(service_dependency(CurrencyService)),
):
    currency = await service.get_by_code(code)
    if currency is None:
        raise not_found("Currency", code)
    return currency


rates_router = build_crud_router(
    CurrencyConversionRateService,
    CurrencyConversionRateCreate,
    CurrencyConversionRateUpdate,
    CurrencyConversionRateOut,
    label="Currency conversion rate",
)


@rates_router.get("/currency/{code}", response_model=list[CurrencyConversionRateOut])
async def list_rates_by_currency(
    code: str,
    service: CurrencyConversionRateService = Depends(service_dependency(CurrencyConversionRateService)),
):
    return await service.get_by_currency_code(code)


@rates_router.get("/currency/{code}/date/{day}", response_model=CurrencyConversionRateOut)
async def get_rate_by_currency_and_date(
    code: str,
    day: date,
    service: CurrencyConversionRateService = Depends(service_dependency(CurrencyConversionRateService)),
):
    """Return the rate recorded for ``code`` on the given calendar day."""
    rate = await service.get_by_currency_and_date(code, datetime(day.year, day.month, day.day))
    if rate is None:
        raise not_found("Currency conversion rate", f"{code.upper()}/{day.isoformat()}")
    return rate


suppliers_router = build_crud_router(
    SupplierService, SupplierCreate, SupplierUpdate, SupplierOut, label="Supplier"
)


@suppliers_router.get("/type/{supplier_type}", response_model=list[SupplierOut])
async def list_suppliers_by_type(
    supplier_type: str,
    service: SupplierService = Depends(service_dependency(SupplierService)),
):
    return await service.get_by_type(supplier_type)


service_users_router = build_crud_router(
    ServiceUserService,
    ServiceUserCreate,
    ServiceUserUpdate,
    ServiceUserOut,
    label="Service user",
    include_inactive=True,
)
