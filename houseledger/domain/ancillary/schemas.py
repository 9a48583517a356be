"""Pydantic schemas for ancillary reference data."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from houseledger.core.schemas import AuditedOut, RequestModel, reject_null


def _upper(value: Optional[str]) -> Optional[str]:
    return value.upper() if value else value


# -- countries ---------------------------------------------------------------


class CountryCreate(RequestModel):
    name: str
    description: Optional[str] = None
    country_code_alf3: str = Field(min_length=3, max_length=3)
    country_code_num3: Optional[str] = Field(default=None, max_length=3)
    note: Optional[str] = None

    normalize_code = field_validator("country_code_alf3")(_upper)


class CountryUpdate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    country_code_alf3: Optional[str] = Field(default=None, min_length=3, max_length=3)
    country_code_num3: Optional[str] = Field(default=None, max_length=3)
    note: Optional[str] = None

    normalize_code = field_validator("country_code_alf3")(_upper)
    required_fields = field_validator("name", "country_code_alf3", mode="before")(reject_null)


class CountryOut(AuditedOut):
    name: str
    description: Optional[str] = None
    country_code_alf3: str
    country_code_num3: Optional[str] = None


# -- currencies --------------------------------------------------------------


class CurrencyCreate(RequestModel):
    name: str
    description: Optional[str] = None
    currency_code_alf3: str = Field(min_length=3, max_length=3)
    currency_code_num3: Optional[str] = Field(default=None, max_length=3)
    note: Optional[str] = None

    normalize_code = field_validator("currency_code_alf3")(_upper)


class CurrencyUpdate(RequestModel):
    name: Optional[str] = None
    description: Optional[str] = None
    currency_code_alf3: Optional[str] = Field(default=None, min_length=3, max_length=3)
    currency_code_num3: Optional[str] = Field(default=None, max_length=3)
    note: Optional[str] = None

    normalize_code = field_validator("currency_code_alf3")(_upper)
    required_fields = field_validator("name", "currency_code_alf3", mode="before")(reject_null)


class CurrencyOut(AuditedOut):
    name: str
    description: Optional[str] = None
    currency_code_alf3: str
    currency_code_num3: Optional[str] = None


# -- conversion rates --------------------------------------------------------


class CurrencyConversionRateCreate(RequestModel):
    rate_value: Decimal = Field(gt=0)
    currency_code_alf3: str = Field(min_length=3, max_length=3)
    referring_date: datetime
    unique_key: Optional[str] = None
    note: Optional[str] = None

    normalize_code = field_validator("currency_code_alf3")(_upper)


class CurrencyConversionRateUpdate(RequestModel):
    rate_value: Optional[Decimal] = Field(default=None, gt=0)
    currency_code_alf3: Optional[str] = Field(default=None, min_length=3, max_length=3)
    referring_date: Optional[datetime] = None
    unique_key: Optional[str] = None
    note: Optional[str] = None

    normalize_code = field_validator("currency_code_alf3")(_upper)
    required_fields = field_validator(
        "rate_value", "currency_code_alf3", "referring_date", mode="before"
    )(reject_null)


class CurrencyConversionRateOut(AuditedOut):
    rate_value: Decimal
    currency_code_alf3: str
    referring_date: datetime
    unique_key: Optional[str] = None


# -- suppliers ---------------------------------------------------------------


class SupplierCreate(RequestModel):
    name: str
    unit_measure: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    contract: Optional[str] = None
    note: Optional[str] = None


class SupplierUpdate(RequestModel):
    name: Optional[str] = None
    unit_measure: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    contract: Optional[str] = None
    note: Optional[str] = None

    required_name = field_validator("name", mode="before")(reject_null)


class SupplierOut(AuditedOut):
    name: str
    unit_measure: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    contract: Optional[str] = None


# -- service users -----------------------------------------------------------


class ServiceUserCreate(RequestModel):
    name: Optional[str] = None
    surname: Optional[str] = None
    note: Optional[str] = None


class ServiceUserUpdate(ServiceUserCreate):
    pass


class ServiceUserOut(AuditedOut):
    name: Optional[str] = None
    surname: Optional[str] = None
