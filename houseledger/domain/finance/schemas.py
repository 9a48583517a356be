"""Pydantic schemas for the finance context."""
from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from houseledger.core.schemas import ApiModel, AuditedOut, RequestModel, reject_null


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert aware datetimes to naive UTC so they compare with stored values."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


# -- banks -------------------------------------------------------------------


class BankBase(RequestModel):
    description: Optional[str] = None
    web_url: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    phone: Optional[str] = None
    mail: Optional[str] = None
    reference_name: Optional[str] = None
    country_id: Optional[int] = None
    note: Optional[str] = None


class BankCreate(BankBase):
    name: str


class BankUpdate(BankBase):
    name: Optional[str] = None

    required_name = field_validator("name", mode="before")(reject_null)


class BankOut(AuditedOut):
    name: str
    description: Optional[str] = None
    web_url: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    phone: Optional[str] = None
    mail: Optional[str] = None
    reference_name: Optional[str] = None
    country_id: Optional[int] = None


# -- accounts ----------------------------------------------------------------


class AccountBase(RequestModel):
    account_number: Optional[str] = None
    description: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    account_type: Optional[str] = None
    currency_id: Optional[int] = None
    bank_id: Optional[int] = None
    note: Optional[str] = None


class AccountCreate(AccountBase):
    name: str


class AccountUpdate(AccountBase):
    name: Optional[str] = None

    required_name = field_validator("name", mode="before")(reject_null)


class AccountOut(AuditedOut):
    name: str
    account_number: Optional[str] = None
    description: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    account_type: Optional[str] = None
    currency_id: Optional[int] = None
    bank_id: Optional[int] = None
    bank_name: Optional[str] = None


# -- balances ----------------------------------------------------------------


class BalanceCreate(RequestModel):
    amount: Decimal
    balance_date: datetime
    account_id: Optional[int] = None
    note: Optional[str] = None

    normalize_balance_date = field_validator("balance_date")(_naive_utc)


class BalanceUpdate(RequestModel):
    amount: Optional[Decimal] = None
    balance_date: Optional[datetime] = None
    account_id: Optional[int] = None
    note: Optional[str] = None

    normalize_balance_date = field_validator("balance_date")(_naive_utc)
    required_fields = field_validator("amount", "balance_date", mode="before")(reject_null)


class BalanceOut(AuditedOut):
    amount: Decimal
    balance_date: datetime
    account_id: Optional[int] = None


# -- transactions ------------------------------------------------------------


class CreateTransactionRequest(RequestModel):
    """Body of ``POST /transactions``.

    Every field is optional at the type level so that missing values are
    reported by the transaction validator with field-level messages.
    """

    transaction_date: Optional[datetime] = None
    amount: Optional[Decimal] = Field(default=None, max_digits=16)
    description: Optional[str] = None
    account_id: Optional[int] = None
    category_name: Optional[str] = None
    is_category_confirmed: bool = False
    note: Optional[str] = None

    normalize_transaction_date = field_validator("transaction_date")(_naive_utc)


class CategoryOut(ApiModel):
    name: str
    is_confirmed: bool


class TransactionOut(AuditedOut):
    transaction_date: datetime
    amount: Decimal
    description: Optional[str] = None
    unique_key: Optional[str] = None
    account_id: int
    account_name: Optional[str] = None
    category: Optional[CategoryOut] = None


__all__ = [
    "AccountCreate",
    "AccountOut",
    "AccountUpdate",
    "BalanceCreate",
    "BalanceOut",
    "BalanceUpdate",
    "BankCreate",
    "BankOut",
    "BankUpdate",
    "CategoryOut",
    "CreateTransactionRequest",
    "TransactionOut",
]
