# backoffice/utils/seed.py

import logging

from pydantic import ValidationError

from backoffice.core.errors import InvalidDataError
from backoffice.resources import (
    ACCOUNT_MASTERS,
    COMPANIES,
    CUSTOMERS,
    INVENTORY_MASTERS,
    SUPPLIERS,
)

logger = logging.getLogger(__name__)

SAMPLE_DATA = {
    COMPANIES: [
        {"name": "Tech Solutions Inc.", "code": "TSI", "address": "123 Business St",
         "phone": "+1-555-0123", "email": "info@techsolutions.com"},
    ],
    ACCOUNT_MASTERS: [
        {"accountCode": "1000", "accountName": "Cash", "accountType": "Assets",
         "description": "Cash in hand and bank"},
        {"accountCode": "2000", "accountName": "Accounts Payable", "accountType": "Liabilities",
         "description": "Money owed to suppliers"},
    ],
    INVENTORY_MASTERS: [
        {"itemCode": "APL-001", "itemName": "Organic Apples", "category": "Fruits", "unit": "kg",
         "description": "Fresh organic apples", "minimumStock": 20, "maximumStock": 500,
         "reorderLevel": 25, "unitPrice": "3.50"},
        {"itemCode": "CAR-002", "itemName": "Fresh Carrots", "category": "Vegetables", "unit": "kg",
         "description": "Farm fresh carrots", "minimumStock": 15, "maximumStock": 300,
         "reorderLevel": 20, "unitPrice": "2.25"},
    ],
    CUSTOMERS: [
        {"customerCode": "CUST001", "customerName": "Acme Corp Ltd.", "contactPerson": "John Smith",
         "address": "456 Market Ave", "phone": "+1-555-0456", "email": "john@acmecorp.com",
         "creditLimit": "10000.00"},
        {"customerCode": "CUST002", "customerName": "Fresh Foods Inc.", "contactPerson": "Sarah Johnson",
         "address": "789 Food Plaza", "phone": "+1-555-0789", "email": "sarah@freshfoods.com",
         "creditLimit": "15000.00"},
    ],
    SUPPLIERS: [
        {"supplierCode": "SUP001", "supplierName": "Farm Fresh Supplies", "contactPerson": "Mike Wilson",
         "address": "321 Farm Road", "phone": "+1-555-0321", "email": "mike@farmfresh.com",
         "paymentTerms": "Net 30"},
    ],
}


def seed_sample_data(store) -> int:
    """
    Inserts the demonstration records through the regular schemas and store,
    so they look exactly like records created over the API. Returns how many
    records were created.
    """
    created = 0
    for resource, rows in SAMPLE_DATA.items():
        collection = store.collection(resource.model)
        for row in rows:
            try:
                payload = resource.create_schema.model_validate(row)
            except ValidationError as exc:
                raise InvalidDataError(resource.invalid_message) from exc
            collection.create(resource.prepare_fields(payload.model_dump()))
            created += 1
    logger.info("Seeded %d sample records", created)
    return created
