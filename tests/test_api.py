"""HTTP tests through the FastAPI app with the database dependency overridden."""

from decimal import Decimal

API = "/api/v1"


def _transaction(account_id, **overrides):
    body = {
        "transactionDate": "2025-03-01T10:00:00",
        "amount": 100.0,
        "accountId": account_id,
        "description": "Electricity bill",
    }
    body.update(overrides)
    return body


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


def test_info(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "HouseLedger"
    assert response.json()["apiPrefix"] == API


def test_create_transaction_returns_201_with_view(client, make_account):
    account_id = make_account(name="Checking")

    response = client.post(
        f"{API}/transactions",
        json=_transaction(account_id, categoryName="Groceries", isCategoryConfirmed=True),
    )

    assert response.status_code == 201
    body = response.json()
    assert response.headers["location"].endswith(f"/transactions/{body['id']}")
    assert body["accountName"] == "Checking"
    assert Decimal(body["amount"]) == Decimal("100.00")
    assert body["uniqueKey"] == f"{account_id}_20250301_100.00"
    assert body["category"] == {"name": "Groceries", "isConfirmed": True}
    assert body["isActive"] is True
    assert response.headers["x-content-type-options"] == "nosniff"
    assert "x-request-id" in response.headers


def test_create_transaction_without_category(client, make_account):
    account_id = make_account()

    body = client.post(f"{API}/transactions", json=_transaction(account_id)).json()

    assert body["category"] is None


def test_create_transaction_validation_errors(client, make_account):
    account_id = make_account()

    response = client.post(f"{API}/transactions", json=_transaction(account_id, amount=0))

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["errors"] == {"amount": ["Amount cannot be zero"]}


def test_create_transaction_missing_fields(client):
    response = client.post(f"{API}/transactions", json={})

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"transactionDate", "amount", "accountId"}


def test_unknown_fields_are_rejected(client, make_account):
    account_id = make_account()

    response = client.post(f"{API}/transactions", json=_transaction(account_id, merchant="Shop"))

    assert response.status_code == 400
    assert "merchant" in response.json()["errors"]


def test_create_transaction_unknown_account(client):
    response = client.post(f"{API}/transactions", json=_transaction(999))

    assert response.status_code == 400
    assert response.json()["detail"] == "Account 999 not found or inactive"


def test_create_transaction_duplicate(client, make_account):
    account_id = make_account()
    assert client.post(f"{API}/transactions", json=_transaction(account_id)).status_code == 201

    response = client.post(f"{API}/transactions", json=_transaction(account_id, amount=-100.0))

    assert response.status_code == 400
    assert "Duplicate transaction" in response.json()["detail"]


def test_transactions_by_account_are_paged(client, make_account):
    account_id = make_account()
    for day in (1, 2, 3):
        client.post(
            f"{API}/transactions",
            json=_transaction(account_id, transactionDate=f"2025-03-0{day}T08:00:00"),
        )

    response = client.get(f"{API}/transactions/account/{account_id}", params={"page": 1, "pageSize": 2})

    assert response.status_code == 200
    page = response.json()
    assert page["totalCount"] == 3
    assert page["totalPages"] == 2
    assert page["hasNext"] is True
    assert page["hasPrevious"] is False
    assert [item["transactionDate"][:10] for item in page["items"]] == ["2025-03-03", "2025-03-02"]
    assert page["items"][0]["accountName"] == "Checking"

    filtered = client.get(
        f"{API}/transactions/account/{account_id}",
        params={"fromDate": "2025-03-02T00:00:00"},
    ).json()
    assert filtered["totalCount"] == 2


def test_recent_transactions_clamp_page_size(client, make_account):
    account_id = make_account()
    client.post(f"{API}/transactions", json=_transaction(account_id))

    page = client.get(f"{API}/transactions/recent", params={"page": 0, "pageSize": 1000}).json()

    assert page["page"] == 1
    assert page["pageSize"] == 100
    assert page["totalCount"] == 1


def test_transaction_soft_and_hard_delete(client, make_account):
    account_id = make_account()
    created = client.post(f"{API}/transactions", json=_transaction(account_id)).json()
    url = f"{API}/transactions/{created['id']}"

    assert client.delete(f"{url}/soft").status_code == 204
    assert client.delete(f"{url}/soft").status_code == 204
    assert client.get(url).status_code == 404
    assert client.delete(f"{url}/hard").status_code == 204
    assert client.delete(f"{url}/hard").status_code == 404


def test_bank_crud_round(client):
    created = client.post(f"{API}/banks", json={"name": "Mountain Bank", "city": "Lugano"})
    assert created.status_code == 201
    bank_id = created.json()["id"]

    updated = client.put(f"{API}/banks/{bank_id}", json={"city": "Bellinzona"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Mountain Bank"
    assert updated.json()["city"] == "Bellinzona"

    assert [b["id"] for b in client.get(f"{API}/banks").json()] == [bank_id]


def test_missing_entity_returns_404(client):
    response = client.get(f"{API}/banks/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Bank with ID 999 not found"
    assert client.put(f"{API}/rooms/999", json={"name": "Attic"}).status_code == 404
    assert client.delete(f"{API}/suppliers/999/soft").status_code == 404


def test_hard_delete_of_referenced_bank_conflicts(client):
    bank_id = client.post(f"{API}/banks", json={"name": "Mountain Bank"}).json()["id"]
    client.post(f"{API}/accounts", json={"name": "Checking", "bankId": bank_id})

    response = client.delete(f"{API}/banks/{bank_id}/hard")

    assert response.status_code == 409
    assert response.json()["title"] == "Conflict"


def test_accounts_by_bank(client):
    bank_id = client.post(f"{API}/banks", json={"name": "Mountain Bank"}).json()["id"]
    client.post(f"{API}/accounts", json={"name": "Checking", "bankId": bank_id})

    accounts = client.get(f"{API}/accounts/bank/{bank_id}").json()

    assert [a["bankName"] for a in accounts] == ["Mountain Bank"]


def test_currency_lookup_by_code(client):
    client.post(f"{API}/currencies", json={"name": "Swiss franc", "currencyCodeAlf3": "chf"})

    assert client.get(f"{API}/currencies/code/CHF").json()["currencyCodeAlf3"] == "CHF"
    assert client.get(f"{API}/currencies/code/XXX").status_code == 404


def test_conversion_rate_by_currency_and_date(client):
    client.post(
        f"{API}/currency-conversion-rates",
        json={"rateValue": 0.94, "currencyCodeAlf3": "USD", "referringDate": "2025-04-02T17:00:00"},
    )

    found = client.get(f"{API}/currency-conversion-rates/currency/usd/date/2025-04-02")
    missing = client.get(f"{API}/currency-conversion-rates/currency/usd/date/2025-04-03")

    assert found.status_code == 200
    assert Decimal(found.json()["rateValue"]) == Decimal("0.94")
    assert missing.status_code == 404


def test_service_users_include_inactive(client):
    user_id = client.post(f"{API}/serviceusers", json={"name": "Ada", "surname": "Rossi"}).json()["id"]
    client.delete(f"{API}/serviceusers/{user_id}/soft")

    assert client.get(f"{API}/serviceusers").json() == []
    everyone = client.get(f"{API}/serviceusers", params={"includeInactive": "true"}).json()
    assert [(u["id"], u["isActive"]) for u in everyone] == [(user_id, False)]


def test_house_thing_renew(client):
    room_id = client.post(f"{API}/rooms", json={"name": "Kitchen"}).json()["id"]
    thing = client.post(
        f"{API}/housethings",
        json={"name": "Fridge", "purchaseDate": "2015-05-01T00:00:00", "roomId": room_id},
    ).json()
    assert thing["historyId"] == thing["id"]
    assert thing["roomName"] == "Kitchen"

    renewed = client.post(
        f"{API}/housethings/{thing['id']}/renew",
        json={"name": "Fridge XL", "purchaseDate": "2025-05-01T00:00:00", "roomId": room_id},
    )

    assert renewed.status_code == 201
    assert renewed.json()["historyId"] == thing["historyId"]
    assert renewed.headers["location"].endswith(f"/housethings/{renewed.json()['id']}")
    history = client.get(f"{API}/housethings/history/{thing['historyId']}").json()
    assert [h["isActive"] for h in history] == [True, False]
    assert len(client.get(f"{API}/housethings/room/{room_id}").json()) == 1


def test_renew_missing_house_thing(client):
    response = client.post(
        f"{API}/housethings/999/renew",
        json={"name": "Oven", "purchaseDate": "2025-01-01T00:00:00"},
    )

    assert response.status_code == 404


def test_sub_cent_amount_is_rejected(client, make_account):
    account_id = make_account()

    response = client.post(f"{API}/transactions", json=_transaction(account_id, amount="0.001"))

    assert response.status_code == 400
    assert response.json()["errors"] == {"amount": ["Amount cannot have more than 2 decimal places"]}


def test_null_for_required_column_is_rejected(client):
    bank_id = client.post(f"{API}/banks", json={"name": "Mountain Bank"}).json()["id"]

    response = client.put(f"{API}/banks/{bank_id}", json={"name": None})

    assert response.status_code == 400
    assert "name" in response.json()["errors"]
    assert client.get(f"{API}/banks/{bank_id}").json()["name"] == "Mountain Bank"


def test_unknown_reference_is_a_bad_request(client):
    response = client.post(f"{API}/accounts", json={"name": "Checking", "bankId": 999})

    assert response.status_code == 400
    assert response.json()["title"] == "Bad Request"
    assert client.get(f"{API}/accounts").json() == []

    orphan = client.post(
        f"{API}/housethings",
        json={"name": "Sofa", "purchaseDate": "2024-01-01T00:00:00", "roomId": 999},
    )
    assert orphan.status_code == 400

    balance = client.post(
        f"{API}/balances",
        json={"amount": "10.00", "balanceDate": "2025-03-01T00:00:00", "accountId": 999},
    )
    assert balance.status_code == 400


def test_renew_with_unknown_room_is_a_bad_request(client):
    thing = client.post(
        f"{API}/housethings", json={"name": "Fridge", "purchaseDate": "2015-05-01T00:00:00"}
    ).json()

    response = client.post(
        f"{API}/housethings/{thing['id']}/renew",
        json={"name": "Fridge XL", "purchaseDate": "2025-05-01T00:00:00", "roomId": 999},
    )

    assert response.status_code == 400
    assert client.get(f"{API}/housethings/{thing['id']}").json()["isActive"] is True
