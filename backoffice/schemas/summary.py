# backoffice/schemas/summary.py

from typing import List

from backoffice.schemas.base import ApiSchema


class DashboardMetrics(ApiSchema):
    companies: int
    inventory_items: int
    customers: int
    suppliers: int
    cold_storage_units: int
    active_customers: int
    transactions: int


class AccountTypeCount(ApiSchema):
    type: str
    count: int


class AccountSummary(ApiSchema):
    total_accounts: int
    active_accounts: int
    accounts_by_type: List[AccountTypeCount]


class TransactionSummary(ApiSchema):
    total_transactions: int
    this_month_transactions: int
    total_amount: str


class InventorySummary(ApiSchema):
    total_items: int
    active_items: int
    total_transactions: int
    this_month_transactions: int
    total_in_quantity: int
    total_out_quantity: int
    total_value: str
    low_stock_items: int


class ColdStorageSummary(ApiSchema):
    total_units: int
    total_capacity: int
    total_occupancy: int
    occupancy_rate: float
    total_transactions: int
    total_in_quantity: int
    total_out_quantity: int
    active_transactions: int
