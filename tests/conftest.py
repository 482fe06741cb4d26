import pytest
from fastapi.testclient import TestClient

from backoffice.main import create_app
from backoffice.storage.store import ResourceStore


@pytest.fixture
def store():
    store = ResourceStore.in_memory()
    yield store
    store.close()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def company_payload():
    return {"name": "Acme", "code": "AC1", "email": "a@acme.com"}


@pytest.fixture
def inventory_payload():
    return {
        "itemCode": "APL-001",
        "itemName": "Organic Apples",
        "category": "Fruits",
        "unit": "kg",
        "minimumStock": 20,
        "maximumStock": 500,
        "reorderLevel": 25,
        "unitPrice": "3.50",
    }
