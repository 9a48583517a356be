from datetime import datetime
from decimal import Decimal
from typing import Optional

import anyio
import pytest

from houseledger.core.errors import AccountNotFound, DuplicateTransaction, ValidationError
from houseledger.core.schemas import PageParams
from houseledger.domain.finance.models import Transaction
from houseledger.domain.finance.schemas import CreateTransactionRequest
from houseledger.domain.finance.services import TransactionService
from houseledger.domain.finance.transactions import (
    SqlAlchemyTransactionStore,
    TransactionStore,
    create_transaction,
)

NOW = datetime(2025, 3, 2, 12, 0)


class FakeTransactionStore(TransactionStore):
    """In-memory store recording every call."""

    def __init__(self, accounts: Optional[dict] = None, existing_keys=()):
        self.accounts = accounts if accounts is not None else {1: "Checking"}
        self.keys = set(existing_keys)
        self.inserted: list[Transaction] = []

    async def account_exists_and_active(self, account_id: int) -> bool:
        return account_id in self.accounts

    async def get_account_name(self, account_id: int) -> Optional[str]:
        return self.accounts.get(account_id)

    async def exists_by_unique_key(self, unique_key: str) -> bool:
        return unique_key in self.keys

    async def insert(self, transaction: Transaction) -> Transaction:
        transaction.id = len(self.inserted) + 1
        transaction.created_date = NOW
        transaction.last_updated_date = NOW
        self.keys.add(transaction.unique_key)
        self.inserted.append(transaction)
        return transaction


def _request(**overrides):
    data = {
        "transaction_date": datetime(2025, 3, 1),
        "amount": Decimal("100.00"),
        "account_id": 1,
        "description": "Electricity bill",
    }
    data.update(overrides)
    return CreateTransactionRequest(**data)


def _create(request, store):
    async def run():
        return await create_transaction(request, store, now=NOW)

    return anyio.run(run)


def test_creates_transaction_with_account_name_and_key():
    store = FakeTransactionStore()

    view = _create(_request(), store)

    assert view.id == 1
    assert view.account_name == "Checking"
    assert view.unique_key == "1_20250301_100.00"
    assert view.amount == Decimal("100.00")
    assert view.category is None
    assert len(store.inserted) == 1


def test_zero_amount_never_reaches_insert():
    store = FakeTransactionStore()

    with pytest.raises(ValidationError) as excinfo:
        _create(_request(amount=Decimal("0")), store)

    assert excinfo.value.errors == {"amount": ["Amount cannot be zero"]}
    assert store.inserted == []


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        _create(_request(amount=None), FakeTransactionStore())


def test_unknown_account_is_rejected_without_insert():
    store = FakeTransactionStore(accounts={})

    with pytest.raises(AccountNotFound, match="Account 1 not found or inactive"):
        _create(_request(), store)

    assert store.inserted == []


def test_duplicate_key_is_rejected():
    store = FakeTransactionStore()
    _create(_request(), store)

    with pytest.raises(DuplicateTransaction):
        _create(_request(amount=Decimal("-100.00"), description="Refund"), store)

    assert len(store.inserted) == 1


def test_category_is_attached():
    view = _create(
        _request(category_name="Groceries", is_category_confirmed=True), FakeTransactionStore()
    )

    assert view.category.name == "Groceries"
    assert view.category.is_confirmed is True


def test_blank_category_is_ignored():
    store = FakeTransactionStore()

    view = _create(_request(category_name="   "), store)

    assert view.category is None
    assert store.inserted[0].category_name is None


class CancellingStore(FakeTransactionStore):
    """Cancels the surrounding scope while the duplicate check is in flight."""

    scope: Optional[anyio.CancelScope] = None

    async def exists_by_unique_key(self, unique_key: str) -> bool:
        self.scope.cancel()
        await anyio.sleep(0)
        return await super().exists_by_unique_key(unique_key)


def test_cancellation_during_duplicate_check_leaves_nothing_behind():
    store = CancellingStore()

    async def run():
        with anyio.CancelScope() as scope:
            store.scope = scope
            await create_transaction(_request(), store, now=NOW)
        return scope

    scope = anyio.run(run)

    assert scope.cancelled_caught
    assert store.inserted == []


# -- against SQLite ----------------------------------------------------------


def _create_in_db(run_db, request):
    async def run(session):
        return await create_transaction(request, SqlAlchemyTransactionStore(session), now=NOW)

    return run_db(run)


def test_database_dedup_first_succeeds_second_fails(run_db, make_account):
    account_id = make_account()
    request = _request(account_id=account_id)

    first = _create_in_db(run_db, request)
    assert first.id is not None
    assert first.account_name == "Checking"
    assert first.is_active is True
    assert first.created_date == first.last_updated_date

    with pytest.raises(DuplicateTransaction):
        _create_in_db(run_db, request)


def test_database_soft_deleted_duplicate_does_not_block(run_db, make_account):
    account_id = make_account()
    request = _request(account_id=account_id)
    first = _create_in_db(run_db, request)

    assert run_db(lambda session: TransactionService(session).soft_delete(first.id)) is True

    second = _create_in_db(run_db, request)
    assert second.id != first.id


def test_database_inactive_account_is_rejected(run_db, make_account):
    account_id = make_account(is_active=False)

    with pytest.raises(AccountNotFound):
        _create_in_db(run_db, _request(account_id=account_id))

    async def count(session):
        page = await TransactionService(session).get_recent(PageParams())
        return page.total_count

    assert run_db(count) == 0


def test_database_persists_category(run_db, make_account):
    account_id = make_account()
    created = _create_in_db(
        run_db, _request(account_id=account_id, category_name="Utilities", is_category_confirmed=True)
    )

    stored = run_db(lambda session: TransactionService(session).get_by_id(created.id))

    assert stored.category_name == "Utilities"
    assert stored.is_category_confirmed is True
    assert stored.account_name == "Checking"


def test_database_race_on_unique_key_reports_duplicate(run_db, make_account):
    account_id = make_account()
    key = f"{account_id}_20250301_100.00"

    async def insert_directly(session):
        session.add(
            Transaction(
                transaction_date=datetime(2025, 3, 1, 8, 0),
                amount=Decimal("100.00"),
                account_id=account_id,
                unique_key=key,
                is_active=True,
            )
        )
        await session.commit()

    run_db(insert_directly)

    async def insert_again(session):
        # skips the pre-insert check, as a request that lost the race would
        return await SqlAlchemyTransactionStore(session).insert(
            Transaction(
                transaction_date=datetime(2025, 3, 1, 18, 0),
                amount=Decimal("-100.00"),
                account_id=account_id,
                unique_key=key,
                is_active=True,
            )
        )

    with pytest.raises(DuplicateTransaction):
        run_db(insert_again)


def test_database_insert_for_missing_account_is_not_a_duplicate(run_db):
    async def insert(session):
        return await SqlAlchemyTransactionStore(session).insert(
            Transaction(
                transaction_date=datetime(2025, 3, 1),
                amount=Decimal("1.00"),
                account_id=999,
                unique_key="999_20250301_1.00",
                is_active=True,
            )
        )

    with pytest.raises(AccountNotFound, match="Account 999"):
        run_db(insert)
