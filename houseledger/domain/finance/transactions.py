"""Transaction creation: validation, account check, dedup key and insert.

``create_transaction`` is the only write path for transactions. It runs
sequentially and every failure short-circuits before the single insert, so a
rejected (or cancelled) request never leaves a partial write behind.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from houseledger.core.audit import utcnow
from houseledger.core.config import settings
from houseledger.core.errors import AccountNotFound, DuplicateTransaction, ValidationError
from houseledger.domain.finance.category import TransactionCategory
from houseledger.domain.finance.models import Account, Transaction
from houseledger.domain.finance.schemas import CreateTransactionRequest, TransactionOut

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 500
CATEGORY_NAME_MAX_LENGTH = 100
NOTE_MAX_LENGTH = 1000

_CENT = Decimal("0.01")


def validate_create_transaction(
    request: CreateTransactionRequest,
    now: Optional[datetime] = None,
) -> dict[str, list[str]]:
    """Return field-level violations for a create request (empty when valid)."""
    now = now or utcnow()
    errors: dict[str, list[str]] = {}

    def fail(field: str, message: str) -> None:
        errors.setdefault(field, []).append(message)

    if request.transaction_date is None:
        fail("transactionDate", "Transaction date is required")
    elif request.transaction_date > now + timedelta(days=settings.TRANSACTION_MAX_FUTURE_DAYS):
        fail("transactionDate", "Transaction date cannot be in the future")

    if request.amount is None:
        fail("amount", "Amount is required")
    elif request.amount == 0:
        fail("amount", "Amount cannot be zero")
    elif request.amount != request.amount.quantize(_CENT):
        # the column keeps two decimals; finer amounts would be stored rounded
        fail("amount", "Amount cannot have more than 2 decimal places")

    if request.account_id is None:
        fail("accountId", "Account ID is required")
    elif request.account_id <= 0:
        fail("accountId", "Valid account ID is required")

    if request.description is not None and len(request.description) > DESCRIPTION_MAX_LENGTH:
        fail("description", f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters")

    if request.category_name is not None and len(request.category_name) > CATEGORY_NAME_MAX_LENGTH:
        fail("categoryName", f"Category name cannot exceed {CATEGORY_NAME_MAX_LENGTH} characters")

    if request.note is not None and len(request.note) > NOTE_MAX_LENGTH:
        fail("note", f"Note cannot exceed {NOTE_MAX_LENGTH} characters")

    return errors


def derive_unique_key(account_id: int, transaction_date: datetime, amount: Decimal) -> str:
    """Fingerprint used for duplicate detection: ``{account}_{yyyyMMdd}_{|amount|:.2f}``.

    The sign and the description are deliberately ignored, so a refund and
    the original charge of the same amount on the same day collide.
    """
    magnitude = abs(Decimal(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{account_id}_{transaction_date:%Y%m%d}_{magnitude:.2f}"


class TransactionStore(ABC):
    """Persistence collaborators the creation flow depends on."""

    @abstractmethod
    async def account_exists_and_active(self, account_id: int) -> bool:
        """Return True when the account exists and is active."""

    @abstractmethod
    async def get_account_name(self, account_id: int) -> Optional[str]:
        """Return the account display name, if any."""

    @abstractmethod
    async def exists_by_unique_key(self, unique_key: str) -> bool:
        """Return True when an active transaction already uses the key."""

    @abstractmethod
    async def insert(self, transaction: Transaction) -> Transaction:
        """Persist the transaction and return it with its id assigned."""


class SqlAlchemyTransactionStore(TransactionStore):
    """TransactionStore backed by an AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def account_exists_and_active(self, account_id: int) -> bool:
        result = await self.db.execute(
            select(
                exists().where(Account.id == account_id, Account.is_active.is_(True))
            )
        )
        return bool(result.scalar())

    async def get_account_name(self, account_id: int) -> Optional[str]:
        result = await self.db.execute(select(Account.name).where(Account.id == account_id))
        return result.scalar_one_or_none()

    async def exists_by_unique_key(self, unique_key: str) -> bool:
        result = await self.db.execute(
            select(
                exists().where(
                    Transaction.unique_key == unique_key,
                    Transaction.is_active.is_(True),
                )
            )
        )
        return bool(result.scalar())

    async def insert(self, transaction: Transaction) -> Transaction:
        self.db.add(transaction)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "IntegrityError while inserting transaction %s", transaction.unique_key, exc_info=True
            )
            # a concurrent request committed the same key first
            if await self.exists_by_unique_key(transaction.unique_key):
                raise DuplicateTransaction(transaction.unique_key) from None
            # otherwise the account vanished between the check and the insert
            raise AccountNotFound(transaction.account_id) from None

        await self.db.refresh(transaction)
        return transaction


async def create_transaction(
    request: CreateTransactionRequest,
    store: TransactionStore,
    *,
    now: Optional[datetime] = None,
) -> TransactionOut:
    """Validate, deduplicate and persist a new transaction."""
    logger.info(
        "Creating transaction for account %s with amount %s", request.account_id, request.amount
    )

    errors = validate_create_transaction(request, now)
    if errors:
        logger.info("Transaction request rejected by validation: %s", sorted(errors))
        raise ValidationError(errors)

    if not await store.account_exists_and_active(request.account_id):
        logger.warning("Account not found or inactive: %s", request.account_id)
        raise AccountNotFound(request.account_id)

    transaction = Transaction(
        transaction_date=request.transaction_date,
        amount=request.amount,
        description=request.description,
        account_id=request.account_id,
        note=request.note,
        is_active=True,
    )

    if request.category_name and request.category_name.strip():
        transaction.category = TransactionCategory(
            request.category_name, request.is_category_confirmed
        )
        logger.debug("Transaction category set: %s", transaction.category)

    transaction.unique_key = derive_unique_key(
        request.account_id, request.transaction_date, request.amount
    )

    if await store.exists_by_unique_key(transaction.unique_key):
        logger.warning("Duplicate transaction detected: %s", transaction.unique_key)
        raise DuplicateTransaction(transaction.unique_key)

    transaction = await store.insert(transaction)
    logger.info("Transaction created successfully with ID %s", transaction.id)

    view = TransactionOut.model_validate(transaction)
    view.account_name = await store.get_account_name(request.account_id)
    return view


__all__ = [
    "SqlAlchemyTransactionStore",
    "TransactionStore",
    "create_transaction",
    "derive_unique_key",
    "validate_create_transaction",
]
