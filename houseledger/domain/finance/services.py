"""Query/command services for the finance context."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from houseledger.core.crud import CrudService
from houseledger.core.schemas import Page, PageParams
from houseledger.domain.finance.models import Account, Balance, Bank, Transaction
from houseledger.domain.finance.schemas import TransactionOut

logger = logging.getLogger(__name__)


class BankService(CrudService[Bank]):
    model = Bank
    label = "bank"

    def ordering(self):
        return (Bank.name,)


class AccountService(CrudService[Account]):
    model = Account
    label = "account"

    def ordering(self):
        return (Account.name,)

    def load_options(self):
        return (selectinload(Account.bank),)

    async def get_by_bank(self, bank_id: int) -> list[Account]:
        logger.debug("Getting accounts for bank: %s", bank_id)
        accounts = await self._list(self._active().where(Account.bank_id == bank_id))
        logger.info("Found %d accounts for bank %s", len(accounts), bank_id)
        return accounts


class BalanceService(CrudService[Balance]):
    model = Balance
    label = "balance"

    def ordering(self):
        return (Balance.balance_date.desc(), Balance.id.desc())

    async def get_by_account(self, account_id: int) -> list[Balance]:
        logger.debug("Getting balances for account: %s", account_id)
        return await self._list(self._active().where(Balance.account_id == account_id))


class TransactionService(CrudService[Transaction]):
    """Reads and deletes; creation goes through ``create_transaction``."""

    model = Transaction
    label = "transaction"

    def ordering(self):
        return (Transaction.transaction_date.desc(), Transaction.id.desc())

    def load_options(self):
        return (selectinload(Transaction.account),)

    async def _page(self, criteria: list, params: PageParams) -> Page[TransactionOut]:
        criteria = [Transaction.is_active.is_(True), *criteria]
        total = await self.db.scalar(
            select(func.count()).select_from(Transaction).where(*criteria)
        ) or 0
        result = await self.db.execute(
            self._select()
            .where(*criteria)
            .order_by(*self.ordering())
            .offset(params.offset)
            .limit(params.page_size)
        )
        items = [TransactionOut.model_validate(row) for row in result.scalars().all()]
        return Page[TransactionOut].build(items, total, params.page, params.page_size)

    async def get_by_account(
        self,
        account_id: int,
        params: PageParams,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Page[TransactionOut]:
        logger.debug(
            "Getting transactions for account %s, page %s, pageSize %s",
            account_id,
            params.page,
            params.page_size,
        )
        criteria = [Transaction.account_id == account_id]
        if from_date is not None:
            criteria.append(Transaction.transaction_date >= from_date)
        if to_date is not None:
            criteria.append(Transaction.transaction_date <= to_date)

        page = await self._page(criteria, params)
        logger.info(
            "Found %d of %d transactions for account %s",
            len(page.items),
            page.total_count,
            account_id,
        )
        return page

    async def get_recent(self, params: PageParams) -> Page[TransactionOut]:
        logger.debug("Getting recent transactions, page %s, pageSize %s", params.page, params.page_size)
        page = await self._page([], params)
        logger.info("Found %d of %d recent transactions", len(page.items), page.total_count)
        return page


__all__ = ["AccountService", "BalanceService", "BankService", "TransactionService"]
