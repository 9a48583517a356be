"""Pydantic schemas for salaries."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from houseledger.core.schemas import AuditedOut, RequestModel, reject_null


class SalaryCreate(RequestModel):
    salary_value: Decimal
    salary_value_eur: Decimal = Decimal("0")
    salary_date: datetime
    refer_year: Optional[str] = Field(default=None, pattern=r"^\d{4}$")
    refer_month: Optional[str] = Field(default=None, pattern=r"^(0?[1-9]|1[0-2])$")
    file_name: Optional[str] = None
    exchange_rate: Decimal = Decimal("1")
    currency_id: Optional[int] = None
    user_id: Optional[int] = None
    note: Optional[str] = None


class SalaryUpdate(RequestModel):
    salary_value: Optional[Decimal] = None
    salary_value_eur: Optional[Decimal] = None
    salary_date: Optional[datetime] = None
    refer_year: Optional[str] = Field(default=None, pattern=r"^\d{4}$")
    refer_month: Optional[str] = Field(default=None, pattern=r"^(0?[1-9]|1[0-2])$")
    file_name: Optional[str] = None
    exchange_rate: Optional[Decimal] = None
    currency_id: Optional[int] = None
    user_id: Optional[int] = None
    note: Optional[str] = None

    required_fields = field_validator(
        "salary_value", "salary_value_eur", "salary_date", "exchange_rate", mode="before"
    )(reject_null)


class SalaryOut(AuditedOut):
    salary_value: Decimal
    salary_value_eur: Decimal
    salary_date: datetime
    refer_year: Optional[str] = None
    refer_month: Optional[str] = None
    file_name: Optional[str] = None
    exchange_rate: Decimal
    currency_id: Optional[int] = None
    user_id: Optional[int] = None
