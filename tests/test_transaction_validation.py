from datetime import datetime, timedelta
from decimal import Decimal

from houseledger.domain.finance.schemas import CreateTransactionRequest
from houseledger.domain.finance.transactions import validate_create_transaction

NOW = datetime(2025, 3, 1, 12, 0, 0)


def _request(**overrides):
    data = {
        "transaction_date": datetime(2025, 2, 28, 9, 30),
        "amount": Decimal("42.50"),
        "account_id": 1,
        "description": "Weekly groceries",
    }
    data.update(overrides)
    return CreateTransactionRequest(**data)


def test_valid_request_has_no_errors():
    assert validate_create_transaction(_request(), NOW) == {}


def test_zero_amount_is_rejected():
    errors = validate_create_transaction(_request(amount=Decimal("0")), NOW)
    assert errors == {"amount": ["Amount cannot be zero"]}


def test_negative_amount_is_allowed():
    assert validate_create_transaction(_request(amount=Decimal("-10")), NOW) == {}


def test_missing_required_fields_are_reported_per_field():
    errors = validate_create_transaction(CreateTransactionRequest(), NOW)
    assert errors == {
        "transactionDate": ["Transaction date is required"],
        "amount": ["Amount is required"],
        "accountId": ["Account ID is required"],
    }


def test_non_positive_account_id_is_rejected():
    errors = validate_create_transaction(_request(account_id=0), NOW)
    assert errors == {"accountId": ["Valid account ID is required"]}


def test_exactly_one_day_ahead_is_accepted():
    request = _request(transaction_date=NOW + timedelta(days=1))
    assert validate_create_transaction(request, NOW) == {}


def test_more_than_one_day_ahead_is_rejected():
    request = _request(transaction_date=NOW + timedelta(days=1, microseconds=1))
    errors = validate_create_transaction(request, NOW)
    assert errors == {"transactionDate": ["Transaction date cannot be in the future"]}


def test_length_limits():
    errors = validate_create_transaction(
        _request(description="d" * 501, category_name="c" * 101, note="n" * 1001),
        NOW,
    )
    assert errors == {
        "description": ["Description cannot exceed 500 characters"],
        "categoryName": ["Category name cannot exceed 100 characters"],
        "note": ["Note cannot exceed 1000 characters"],
    }


def test_length_limits_are_inclusive():
    request = _request(description="d" * 500, category_name="c" * 100, note="n" * 1000)
    assert validate_create_transaction(request, NOW) == {}


def test_aware_dates_are_normalised_to_utc():
    request = CreateTransactionRequest.model_validate(
        {"transactionDate": "2025-03-01T10:00:00+02:00", "amount": "5", "accountId": 3}
    )
    assert request.transaction_date == datetime(2025, 3, 1, 8, 0)
    assert request.transaction_date.tzinfo is None


def test_sub_cent_amounts_are_rejected():
    for amount in ("0.001", "-0.004", "10.005"):
        errors = validate_create_transaction(_request(amount=Decimal(amount)), NOW)
        assert errors == {"amount": ["Amount cannot have more than 2 decimal places"]}


def test_smallest_cent_amounts_are_accepted():
    assert validate_create_transaction(_request(amount=Decimal("0.01")), NOW) == {}
    assert validate_create_transaction(_request(amount=Decimal("-0.01")), NOW) == {}
    assert validate_create_transaction(_request(amount=Decimal("12.50")), NOW) == {}
