import pytest


def test_inventory_without_item_code_is_rejected(client, inventory_payload):
    body = dict(inventory_payload)
    del body["itemCode"]

    response = client.post("/api/inventory-masters", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid inventory item data"}
    assert client.get("/api/inventory-masters").json() == []


def test_company_without_name_is_rejected(client):
    response = client.post("/api/companies", json={"code": "AC1"})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid company data"}


@pytest.mark.parametrize(
    "path, body",
    [
        ("companies", {"name": "Acme", "code": "AC1", "isActive": "maybe"}),
        ("inventory-masters", {"itemCode": "A", "itemName": "A", "category": "A", "unit": "kg",
                               "unitPrice": "cheap"}),
        ("inventory-masters", {"itemCode": "A", "itemName": "A", "category": "A", "unit": "kg",
                               "unitPrice": "1.00", "reorderLevel": "lots"}),
        ("customers", {"customerCode": "C", "customerName": "C", "creditLimit": "NaN"}),
        ("transactions", {"transactionNumber": "T", "transactionType": "debit", "accountId": "a",
                          "amount": "10", "transactionDate": "someday"}),
        ("cold-storage-units", {"unitCode": "U", "unitName": "U", "capacity": None}),
        ("users", {"username": "jdoe", "email": "jdoe@example.com"}),
    ],
)
def test_wrongly_typed_bodies_are_rejected(client, path, body):
    response = client.post(f"/api/{path}", json=body)

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid ")
    assert client.get(f"/api/{path}").json() == []


def test_non_object_body_is_rejected(client):
    response = client.post("/api/suppliers", json=["not", "an", "object"])

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid supplier data"}


def test_malformed_json_is_rejected(client):
    response = client.post(
        "/api/customers",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid customer data"}


def test_update_with_invalid_field_rejects_whole_write(client, inventory_payload):
    item = client.post("/api/inventory-masters", json=inventory_payload).json()

    response = client.put(
        f"/api/inventory-masters/{item['id']}",
        json={"itemName": "Renamed", "unitPrice": "free"},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid inventory item data"}
    assert client.get(f"/api/inventory-masters/{item['id']}").json()["itemName"] == item["itemName"]


def test_update_null_for_required_field_is_rejected(client, company_payload):
    company = client.post("/api/companies", json=company_payload).json()

    response = client.put(f"/api/companies/{company['id']}", json={"name": None})

    assert response.status_code == 400
    assert client.get(f"/api/companies/{company['id']}").json()["name"] == "Acme"


def test_update_validation_happens_before_lookup(client):
    response = client.put("/api/companies/missing", json={"isActive": "maybe"})

    assert response.status_code == 400


def test_decimal_strings_are_trimmed_and_kept_as_strings(client):
    body = client.post(
        "/api/transactions",
        json={"transactionNumber": "T-1", "transactionType": "credit", "accountId": "a",
              "amount": " 1250.50 ", "transactionDate": "2024-03-01T09:30:00"},
    ).json()

    assert body["amount"] == "1250.50"


def test_date_only_and_offset_datetimes_are_normalized_to_utc(client):
    date_only = client.post(
        "/api/transactions",
        json={"transactionNumber": "T-1", "transactionType": "credit", "accountId": "a",
              "amount": "1", "transactionDate": "2024-03-01"},
    ).json()
    with_offset = client.post(
        "/api/transactions",
        json={"transactionNumber": "T-2", "transactionType": "credit", "accountId": "a",
              "amount": "1", "transactionDate": "2024-03-01T10:00:00+02:00"},
    ).json()

    assert date_only["transactionDate"].startswith("2024-03-01T")
    assert with_offset["transactionDate"] == "2024-03-01T08:00:00"


def test_blank_optional_dates_become_null(client):
    response = client.post(
        "/api/cold-storage-transactions",
        json={"transactionNumber": "CST-1", "unitId": "u", "itemId": "i",
              "transactionType": "IN", "quantity": 3, "entryDate": "2024-05-02", "exitDate": ""},
    )

    assert response.status_code == 201
    assert response.json()["exitDate"] is None
    assert response.json()["entryDate"].startswith("2024-05-02T")


def test_unknown_fields_are_ignored(client, company_payload):
    response = client.post("/api/companies", json=dict(company_payload, favouriteColour="blue"))

    assert response.status_code == 201
    assert "favouriteColour" not in response.json()


def test_quantity_beyond_integer_column_is_rejected(client):
    response = client.post(
        "/api/stock-transactions",
        json={
            "transactionNumber": "ST-1",
            "itemId": "item-1",
            "transactionType": "IN",
            "quantity": 10**20,
            "transactionDate": "2024-03-01",
        },
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid stock transaction data"}
    assert client.get("/api/stock-transactions").json() == []


def test_update_beyond_integer_column_is_rejected(client):
    unit = client.post(
        "/api/cold-storage-units", json={"unitCode": "U1", "unitName": "Freezer", "capacity": 100}
    ).json()

    response = client.put(f"/api/cold-storage-units/{unit['id']}", json={"capacity": 10**20})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid cold storage unit data"}
    assert client.get(f"/api/cold-storage-units/{unit['id']}").json()["capacity"] == 100


def test_largest_integer_column_value_is_accepted(client, inventory_payload):
    response = client.post(
        "/api/inventory-masters", json=dict(inventory_payload, maximumStock=2**63 - 1)
    )

    assert response.status_code == 201
    assert response.json()["maximumStock"] == 2**63 - 1
