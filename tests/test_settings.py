from inventory_service.app.models.settings import StoreSettings


def test_store_settings_empty_before_first_save(client, auth_headers):
    response = client.get("/api/settings/store", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {}


def test_store_settings_upsert_keeps_single_row(client, auth_headers, db_session):
    first = client.post("/api/settings/store", json={
        "storeName": "Corner Shop",
        "storeEmail": "",
        "storePhone": "555-0100",
    }, headers=auth_headers)
    assert first.status_code == 200, first.text
    assert first.json()["id"] == 1
    assert first.json()["store_email"] is None

    second = client.post("/api/settings/store", json={
        "storeName": "Corner Shop & Deli",
        "storeEmail": "hello@cornershop.com",
    }, headers=auth_headers)
    assert second.status_code == 200, second.text

    stored = client.get("/api/settings/store", headers=auth_headers).json()
    assert stored["store_name"] == "Corner Shop & Deli"
    assert stored["store_email"] == "hello@cornershop.com"
    assert stored["store_phone"] is None
    assert db_session.query(StoreSettings).count() == 1


def test_store_settings_validation(client, auth_headers):
    response = client.post("/api/settings/store", json={
        "storeName": "", "storeEmail": "not-an-email",
    }, headers=auth_headers)
    assert response.status_code == 400
    assert set(response.json()["data"]) == {"storeName", "storeEmail"}


def test_currency_settings(client, auth_headers):
    assert client.get("/api/settings/currency", headers=auth_headers).json() == {}

    response = client.post("/api/settings/currency", json={"currencyCode": "eur"},
                           headers=auth_headers)
    assert response.status_code == 200, response.text
    assert response.json()["currency_code"] == "EUR"

    client.post("/api/settings/currency", json={"currencyCode": "RON"}, headers=auth_headers)
    stored = client.get("/api/settings/currency", headers=auth_headers).json()
    assert stored["id"] == 1
    assert stored["currency_code"] == "RON"


def test_currency_code_must_be_three_letters(client, auth_headers):
    response = client.post("/api/settings/currency", json={"currencyCode": "E1R"},
                           headers=auth_headers)
    assert response.status_code == 400


def test_currency_code_must_be_supported(client, auth_headers):
    response = client.post("/api/settings/currency", json={"currencyCode": "JPY"},
                           headers=auth_headers)
    assert response.status_code == 400
    body = response.json()
    assert body["status_code"] == "1001"
    assert body["message"] == "Unsupported currency code 'JPY'"
    assert list(body["data"]) == ["currencyCode"]
    assert client.get("/api/settings/currency", headers=auth_headers).json() == {}


def test_supported_currencies(client, auth_headers):
    currencies = client.get("/api/settings/currencies", headers=auth_headers).json()
    assert [c["code"] for c in currencies] == ["USD", "EUR", "GBP", "RON"]


def test_dashboard_summary(client, auth_headers, make_item):
    make_item(itemName="Apples", initialStock=20, initialPurchasePrice=2.5, reorderPoint=5)
    make_item(itemName="Bananas", initialStock=0, initialPurchasePrice=None)
    make_item(itemName="Cherries", initialStock=3, initialPurchasePrice=4, reorderPoint=5)

    summary = client.get("/api/dashboard/summary", headers=auth_headers).json()
    assert summary == {
        "total_items": 3,
        "low_stock_items": 1,
        "out_of_stock_items": 1,
        "total_stock_value": 62.0,
        "currency_code": "USD",
    }
