from backoffice.utils.dates import utcnow


def post(client, path, body):
    response = client.post(f"/api/{path}", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def stock_move(item_id, kind, quantity, number, when=None, total_value=None):
    return {
        "transactionNumber": number,
        "itemId": item_id,
        "transactionType": kind,
        "quantity": quantity,
        "totalValue": total_value,
        "transactionDate": when or utcnow().isoformat(),
    }


def test_dashboard_metrics_on_empty_store(client):
    response = client.get("/api/dashboard/metrics")

    assert response.status_code == 200
    assert response.json() == {
        "companies": 0,
        "inventoryItems": 0,
        "customers": 0,
        "suppliers": 0,
        "coldStorageUnits": 0,
        "activeCustomers": 0,
        "transactions": 0,
    }


def test_dashboard_metrics_counts(client, company_payload, inventory_payload):
    post(client, "companies", company_payload)
    post(client, "inventory-masters", inventory_payload)
    post(client, "customers", {"customerCode": "C1", "customerName": "One"})
    post(client, "customers", {"customerCode": "C2", "customerName": "Two", "isActive": False})
    post(client, "cold-storage-units", {"unitCode": "U1", "unitName": "Freezer", "capacity": 10})

    metrics = client.get("/api/dashboard/metrics").json()

    assert metrics["companies"] == 1
    assert metrics["inventoryItems"] == 1
    assert metrics["customers"] == 2
    assert metrics["activeCustomers"] == 1
    assert metrics["suppliers"] == 0
    assert metrics["coldStorageUnits"] == 1


def test_account_summary_groups_by_type(client):
    post(client, "account-masters", {"accountCode": "1000", "accountName": "Cash", "accountType": "Assets"})
    post(client, "account-masters", {"accountCode": "1100", "accountName": "Bank", "accountType": "Assets"})
    post(
        client,
        "account-masters",
        {"accountCode": "9000", "accountName": "Clearing", "accountType": "Suspense", "isActive": False},
    )

    summary = client.get("/api/reports/accounts").json()

    assert summary["totalAccounts"] == 3
    assert summary["activeAccounts"] == 2
    counts = {row["type"]: row["count"] for row in summary["accountsByType"]}
    assert counts["Assets"] == 2
    assert counts["Liabilities"] == 0
    assert counts["Suspense"] == 1


def test_transaction_summary(client):
    today = utcnow().date().isoformat()
    base = {"transactionType": "credit", "accountId": "acc-1"}
    post(client, "transactions", dict(base, transactionNumber="T1", amount="100.25", transactionDate=today))
    post(client, "transactions", dict(base, transactionNumber="T2", amount="49.75", transactionDate=today))
    post(client, "transactions", dict(base, transactionNumber="T3", amount="10", transactionDate="2001-05-05"))

    summary = client.get("/api/reports/transactions").json()

    assert summary == {
        "totalTransactions": 3,
        "thisMonthTransactions": 2,
        "totalAmount": "160.00",
    }


def test_inventory_summary_and_low_stock(client, inventory_payload):
    apples = post(client, "inventory-masters", inventory_payload)
    carrots = post(
        client,
        "inventory-masters",
        dict(inventory_payload, itemCode="CAR-002", itemName="Carrots", reorderLevel=5),
    )
    post(client, "stock-transactions", stock_move(apples["id"], "IN", 30, "S1", total_value="105.00"))
    post(client, "stock-transactions", stock_move(apples["id"], "OUT", 10, "S2", total_value="35.00"))
    post(client, "stock-transactions", stock_move(carrots["id"], "IN", 40, "S3", when="2001-01-01"))

    summary = client.get("/api/reports/inventory").json()

    assert summary["totalItems"] == 2
    assert summary["activeItems"] == 2
    assert summary["totalTransactions"] == 3
    assert summary["thisMonthTransactions"] == 2
    assert summary["totalInQuantity"] == 70
    assert summary["totalOutQuantity"] == 10
    assert summary["totalValue"] == "140.00"
    assert summary["lowStockItems"] == 1

    low = client.get("/api/reports/inventory/low-stock").json()
    assert [(row["itemCode"], row["currentStock"]) for row in low] == [("APL-001", 20)]
    assert low[0]["id"] == apples["id"]


def test_cold_storage_summary(client):
    post(client, "cold-storage-units", {"unitCode": "U1", "unitName": "A", "capacity": 200, "currentOccupancy": 50})
    post(client, "cold-storage-units", {"unitCode": "U2", "unitName": "B", "capacity": 100, "currentOccupancy": 50})
    movement = {"unitId": "u", "itemId": "i", "quantity": 5}
    post(client, "cold-storage-transactions", dict(movement, transactionNumber="C1", transactionType="IN"))
    post(
        client,
        "cold-storage-transactions",
        dict(movement, transactionNumber="C2", transactionType="IN", exitDate="2024-02-01"),
    )
    post(client, "cold-storage-transactions", dict(movement, transactionNumber="C3", transactionType="OUT"))

    summary = client.get("/api/reports/cold-storage").json()

    assert summary == {
        "totalUnits": 2,
        "totalCapacity": 300,
        "totalOccupancy": 100,
        "occupancyRate": 33.3,
        "totalTransactions": 3,
        "totalInQuantity": 10,
        "totalOutQuantity": 5,
        "activeTransactions": 1,
    }


def test_cold_storage_summary_without_units(client):
    summary = client.get("/api/reports/cold-storage").json()

    assert summary["occupancyRate"] == 0.0
    assert summary["totalUnits"] == 0
