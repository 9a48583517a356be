from datetime import datetime
from decimal import Decimal

from houseledger.domain.finance.schemas import CreateTransactionRequest
from houseledger.domain.finance.transactions import derive_unique_key


def test_sign_is_ignored():
    day = datetime(2025, 1, 15)
    assert derive_unique_key(7, day, Decimal("-42.00")) == derive_unique_key(7, day, Decimal("42.00"))


def test_key_format():
    assert derive_unique_key(7, datetime(2025, 1, 15, 18, 45), Decimal("-42")) == "7_20250115_42.00"


def test_amount_is_rounded_half_up():
    day = datetime(2025, 1, 15)
    assert derive_unique_key(1, day, Decimal("10.005")) == "1_20250115_10.01"
    assert derive_unique_key(1, day, Decimal("10.004")) == "1_20250115_10.00"


def test_time_of_day_does_not_matter():
    morning = derive_unique_key(3, datetime(2025, 6, 1, 8, 0), Decimal("9.99"))
    evening = derive_unique_key(3, datetime(2025, 6, 1, 22, 30), Decimal("9.99"))
    assert morning == evening


def test_different_accounts_do_not_collide():
    day = datetime(2025, 6, 1)
    assert derive_unique_key(1, day, Decimal("5")) != derive_unique_key(2, day, Decimal("5"))


def test_offset_dates_use_the_utc_day():
    request = CreateTransactionRequest.model_validate(
        {"transactionDate": "2025-03-01T01:00:00+02:00", "amount": "15.00", "accountId": 4}
    )

    assert request.transaction_date == datetime(2025, 2, 28, 23, 0)
    key = derive_unique_key(request.account_id, request.transaction_date, request.amount)
    assert key == "4_20250228_15.00"
