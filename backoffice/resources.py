# backoffice/resources.py

"""
Registry of the entity types exposed under ``/api/<path>``.

Each entry ties a stored model to its request/response schemas and to the
names used in messages and in the list search.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type

from backoffice.core.security import get_password_hash
from backoffice.models.account_master import AccountMaster
from backoffice.models.cold_storage import ColdStorageTransaction, ColdStorageUnit
from backoffice.models.company import Company
from backoffice.models.crate import Crate
from backoffice.models.customer import Customer
from backoffice.models.inventory_master import InventoryMaster
from backoffice.models.stock_transaction import StockTransaction
from backoffice.models.supplier import Supplier
from backoffice.models.transaction import Transaction
from backoffice.models.user import User
from backoffice.schemas import account_master, cold_storage, company, crate, customer
from backoffice.schemas import inventory_master, stock_transaction, supplier, transaction, user
from backoffice.utils.dates import utcnow


@dataclass(frozen=True)
class Resource:
    path: str
    label: str
    plural: str
    model: Type
    create_schema: Type
    update_schema: Type
    read_schema: Type
    search_fields: Tuple[str, ...] = ()
    prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None

    @property
    def not_found_message(self) -> str:
        return f"{self.label.capitalize()} not found"

    @property
    def invalid_message(self) -> str:
        return f"Invalid {self.label} data"

    def prepare_fields(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self.prepare(fields) if self.prepare else fields


def _hash_password(fields: Dict[str, Any]) -> Dict[str, Any]:
    if "password" in fields:
        fields["hashed_password"] = get_password_hash(fields.pop("password"))
    return fields


def _stamp_last_updated(fields: Dict[str, Any]) -> Dict[str, Any]:
    fields["last_updated"] = utcnow()
    return fields


COMPANIES = Resource(
    path="companies",
    label="company",
    plural="companies",
    model=Company,
    create_schema=company.CompanyCreate,
    update_schema=company.CompanyUpdate,
    read_schema=company.CompanyRead,
    search_fields=("name", "code", "email", "city"),
)

ACCOUNT_MASTERS = Resource(
    path="account-masters",
    label="account",
    plural="accounts",
    model=AccountMaster,
    create_schema=account_master.AccountMasterCreate,
    update_schema=account_master.AccountMasterUpdate,
    read_schema=account_master.AccountMasterRead,
    search_fields=("account_code", "account_name", "account_type"),
)

INVENTORY_MASTERS = Resource(
    path="inventory-masters",
    label="inventory item",
    plural="inventory items",
    model=InventoryMaster,
    create_schema=inventory_master.InventoryMasterCreate,
    update_schema=inventory_master.InventoryMasterUpdate,
    read_schema=inventory_master.InventoryMasterRead,
    search_fields=("item_name", "item_code", "category"),
)

CUSTOMERS = Resource(
    path="customers",
    label="customer",
    plural="customers",
    model=Customer,
    create_schema=customer.CustomerCreate,
    update_schema=customer.CustomerUpdate,
    read_schema=customer.CustomerRead,
    search_fields=("customer_name", "customer_code", "contact_person", "email"),
)

SUPPLIERS = Resource(
    path="suppliers",
    label="supplier",
    plural="suppliers",
    model=Supplier,
    create_schema=supplier.SupplierCreate,
    update_schema=supplier.SupplierUpdate,
    read_schema=supplier.SupplierRead,
    search_fields=("supplier_name", "supplier_code", "contact_person", "email"),
)

TRANSACTIONS = Resource(
    path="transactions",
    label="transaction",
    plural="transactions",
    model=Transaction,
    create_schema=transaction.TransactionCreate,
    update_schema=transaction.TransactionUpdate,
    read_schema=transaction.TransactionRead,
    search_fields=("transaction_number", "description", "reference_number"),
)

STOCK_TRANSACTIONS = Resource(
    path="stock-transactions",
    label="stock transaction",
    plural="stock transactions",
    model=StockTransaction,
    create_schema=stock_transaction.StockTransactionCreate,
    update_schema=stock_transaction.StockTransactionUpdate,
    read_schema=stock_transaction.StockTransactionRead,
    search_fields=("transaction_number", "description", "reference_number"),
)

COLD_STORAGE_UNITS = Resource(
    path="cold-storage-units",
    label="cold storage unit",
    plural="cold storage units",
    model=ColdStorageUnit,
    create_schema=cold_storage.ColdStorageUnitCreate,
    update_schema=cold_storage.ColdStorageUnitUpdate,
    read_schema=cold_storage.ColdStorageUnitRead,
    search_fields=("unit_code", "unit_name", "location"),
)

COLD_STORAGE_TRANSACTIONS = Resource(
    path="cold-storage-transactions",
    label="cold storage transaction",
    plural="cold storage transactions",
    model=ColdStorageTransaction,
    create_schema=cold_storage.ColdStorageTransactionCreate,
    update_schema=cold_storage.ColdStorageTransactionUpdate,
    read_schema=cold_storage.ColdStorageTransactionRead,
    search_fields=("transaction_number", "description"),
)

CRATES = Resource(
    path="crates",
    label="crate",
    plural="crates",
    model=Crate,
    create_schema=crate.CrateCreate,
    update_schema=crate.CrateUpdate,
    read_schema=crate.CrateRead,
    search_fields=("crate_id", "crate_type", "status"),
    prepare=_stamp_last_updated,
)

USERS = Resource(
    path="users",
    label="user",
    plural="users",
    model=User,
    create_schema=user.UserCreate,
    update_schema=user.UserUpdate,
    read_schema=user.UserRead,
    search_fields=("username", "email", "role"),
    prepare=_hash_password,
)

RESOURCES = (
    COMPANIES,
    ACCOUNT_MASTERS,
    INVENTORY_MASTERS,
    CUSTOMERS,
    SUPPLIERS,
    TRANSACTIONS,
    STOCK_TRANSACTIONS,
    COLD_STORAGE_UNITS,
    COLD_STORAGE_TRANSACTIONS,
    CRATES,
    USERS,
)

RESOURCES_BY_PATH = {resource.path: resource for resource in RESOURCES}


def resource_for_path(url_path: str) -> Optional[Resource]:
    """Finds the resource serving ``/api/<path>[/...]``, if any."""
    parts = [part for part in url_path.split("/") if part]
    if len(parts) >= 2 and parts[0] == "api":
        return RESOURCES_BY_PATH.get(parts[1])
    return None
