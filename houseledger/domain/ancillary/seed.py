"""Default reference data (currencies and countries)."""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from houseledger.domain.ancillary.models import Country, Currency

logger = logging.getLogger(__name__)

DEFAULT_CURRENCIES: List[dict] = [
    {"name": "Euro", "currency_code_alf3": "EUR", "currency_code_num3": "978"},
    {"name": "US Dollar", "currency_code_alf3": "USD", "currency_code_num3": "840"},
    {"name": "Swiss Franc", "currency_code_alf3": "CHF", "currency_code_num3": "756"},
    {"name": "Pound Sterling", "currency_code_alf3": "GBP", "currency_code_num3": "826"},
]

DEFAULT_COUNTRIES: List[dict] = [
    {"name": "Italy", "country_code_alf3": "ITA", "country_code_num3": "380"},
    {"name": "Switzerland", "country_code_alf3": "CHE", "country_code_num3": "756"},
    {"name": "Germany", "country_code_alf3": "DEU", "country_code_num3": "276"},
    {"name": "France", "country_code_alf3": "FRA", "country_code_num3": "250"},
    {"name": "United Kingdom", "country_code_alf3": "GBR", "country_code_num3": "826"},
    {"name": "United States", "country_code_alf3": "USA", "country_code_num3": "840"},
]


async def seed_reference_data(db: AsyncSession) -> int:
    """Insert default currencies and countries missing from the database.

    Rows are matched on their alpha-3 code, so running the seed twice is a
    no-op. Returns the number of inserted rows.
    """
    existing = await db.execute(select(Currency.currency_code_alf3))
    currency_codes = {row[0] for row in existing.all()}
    existing = await db.execute(select(Country.country_code_alf3))
    country_codes = {row[0] for row in existing.all()}

    inserted = 0
    for currency in DEFAULT_CURRENCIES:
        if currency["currency_code_alf3"] in currency_codes:
            continue
        db.add(Currency(**currency))
        inserted += 1

    for country in DEFAULT_COUNTRIES:
        if country["country_code_alf3"] in country_codes:
            continue
        db.add(Country(**country))
        inserted += 1

    await db.commit()
    logger.info("Seeded %d reference data rows", inserted)
    return inserted
