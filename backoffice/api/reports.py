# backoffice/api/reports.py

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends

from backoffice.core.errors import store_errors
from backoffice.database import get_store
from backoffice.models.account_master import AccountMaster
from backoffice.models.cold_storage import ColdStorageTransaction, ColdStorageUnit
from backoffice.models.inventory_master import InventoryMaster
from backoffice.models.stock_transaction import StockTransaction
from backoffice.models.transaction import Transaction
from backoffice.schemas.inventory_master import InventoryMasterRead, LowStockItem
from backoffice.schemas.summary import (
    AccountSummary,
    AccountTypeCount,
    ColdStorageSummary,
    InventorySummary,
    TransactionSummary,
)
from backoffice.storage.store import ResourceStore
from backoffice.utils import summaries

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/accounts", response_model=AccountSummary)
def account_summary(store: ResourceStore = Depends(get_store)):
    with store_errors("Failed to fetch account summary"):
        accounts = store.collection(AccountMaster).list()

    return AccountSummary(
        total_accounts=len(accounts),
        active_accounts=sum(1 for a in accounts if a.is_active),
        accounts_by_type=[
            AccountTypeCount(type=type_, count=count)
            for type_, count in summaries.accounts_by_type(accounts)
        ],
    )


@router.get("/transactions", response_model=TransactionSummary)
def transaction_summary(store: ResourceStore = Depends(get_store)):
    with store_errors("Failed to fetch transaction summary"):
        transactions = store.collection(Transaction).list()

    total = sum((summaries.to_decimal(t.amount) for t in transactions), Decimal(0))
    return TransactionSummary(
        total_transactions=len(transactions),
        this_month_transactions=summaries.this_month_count(transactions, "transaction_date"),
        total_amount=summaries.format_money(total),
    )


@router.get("/inventory", response_model=InventorySummary)
def inventory_summary(store: ResourceStore = Depends(get_store)):
    """
    Item counts plus stock movement totals. Total value adds up the
    totalValue of every stock transaction.
    """
    with store_errors("Failed to fetch inventory summary"):
        items = store.collection(InventoryMaster).list()
        movements = store.collection(StockTransaction).list()

    total_in, total_out = summaries.movement_totals(movements)
    total_value = sum((summaries.to_decimal(m.total_value) for m in movements), Decimal(0))

    return InventorySummary(
        total_items=len(items),
        active_items=sum(1 for i in items if i.is_active),
        total_transactions=len(movements),
        this_month_transactions=summaries.this_month_count(movements, "transaction_date"),
        total_in_quantity=total_in,
        total_out_quantity=total_out,
        total_value=summaries.format_money(total_value),
        low_stock_items=len(summaries.low_stock_items(items, movements)),
    )


@router.get("/inventory/low-stock", response_model=List[LowStockItem])
def low_stock(store: ResourceStore = Depends(get_store)):
    with store_errors("Failed to fetch low stock items"):
        items = store.collection(InventoryMaster).list()
        movements = store.collection(StockTransaction).list()

    return [
        LowStockItem(
            **InventoryMasterRead.model_validate(item).model_dump(),
            current_stock=current,
        )
        for item, current in summaries.low_stock_items(items, movements)
    ]


@router.get("/cold-storage", response_model=ColdStorageSummary)
def cold_storage_summary(store: ResourceStore = Depends(get_store)):
    with store_errors("Failed to fetch cold storage summary"):
        units = store.collection(ColdStorageUnit).list()
        movements = store.collection(ColdStorageTransaction).list()

    total_capacity = sum(u.capacity for u in units)
    total_occupancy = sum(u.current_occupancy for u in units)
    total_in, total_out = summaries.movement_totals(movements)

    return ColdStorageSummary(
        total_units=len(units),
        total_capacity=total_capacity,
        total_occupancy=total_occupancy,
        occupancy_rate=summaries.occupancy_rate(total_capacity, total_occupancy),
        total_transactions=len(movements),
        total_in_quantity=total_in,
        total_out_quantity=total_out,
        active_transactions=summaries.active_cold_storage_entries(movements),
    )
