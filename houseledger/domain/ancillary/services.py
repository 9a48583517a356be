"""Query/command services for ancillary reference data."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from houseledger.core.crud import CrudService
from houseledger.domain.ancillary.models import (
    Country,
    Currency,
    CurrencyConversionRate,
    ServiceUser,
    Supplier,
)

logger = logging.getLogger(__name__)


class CountryService(CrudService[Country]):
    model = Country
    label = "country"

    def ordering(self):
        return (Country.name,)

    async def get_by_code(self, code: str) -> Optional[Country]:
        logger.debug("Getting country by code: %s", code)
        result = await self.db.execute(
            self._active().where(Country.country_code_alf3 == code.upper())
        )
        return result.scalars().first()


class CurrencyService(CrudService[Currency]):
    model = Currency
    label = "currency"

    def ordering(self):
        return (Currency.name,)

    async def get_by_code(self, code: str) -> Optional[Currency]:
        logger.debug("Getting currency by code: %s", code)
        result = await self.db.execute(
            self._active().where(Currency.currency_code_alf3 == code.upper())
        )
        return result.scalars().first()


class CurrencyConversionRateService(CrudService[CurrencyConversionRate]):
    model = CurrencyConversionRate
    label = "currency conversion rate"

    def ordering(self):
        return (CurrencyConversionRate.referring_date.desc(), CurrencyConversionRate.id.desc())

    async def get_by_currency_code(self, code: str) -> list[CurrencyConversionRate]:
        logger.debug("Getting conversion rates for currency: %s", code)
        return await self._list(
            self._active().where(CurrencyConversionRate.currency_code_alf3 == code.upper())
        )

    async def get_by_currency_and_date(
        self, code: str, day: datetime
    ) -> Optional[CurrencyConversionRate]:
        """Return the rate of ``code`` recorded on the calendar day of ``day``."""
        start = datetime(day.year, day.month, day.day)
        stmt = self._active().where(
            CurrencyConversionRate.currency_code_alf3 == code.upper(),
            CurrencyConversionRate.referring_date >= start,
            CurrencyConversionRate.referring_date < start + timedelta(days=1),
        )
        result = await self.db.execute(stmt.order_by(*self.ordering()))
        return result.scalars().first()


class SupplierService(CrudService[Supplier]):
    model = Supplier
    label = "supplier"

    def ordering(self):
        return (Supplier.name,)

    async def get_by_type(self, supplier_type: str) -> list[Supplier]:
        logger.debug("Getting suppliers of type: %s", supplier_type)
        return await self._list(self._active().where(Supplier.type == supplier_type))


class ServiceUserService(CrudService[ServiceUser]):
    model = ServiceUser
    label = "service user"

    def ordering(self):
        return (ServiceUser.surname, ServiceUser.name)

    async def get_all(self, include_inactive: bool = False) -> list[ServiceUser]:
        if include_inactive:
            return await self._list(self._select())
        return await super().get_all()


__all__ = [
    "CountryService",
    "CurrencyConversionRateService",
    "CurrencyService",
    "ServiceUserService",
    "SupplierService",
]
