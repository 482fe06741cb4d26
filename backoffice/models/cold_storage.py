from datetime import datetime
from typing import Optional

from backoffice.models.base import RecordBase, utc_column


class ColdStorageUnit(RecordBase, table=True):
    __tablename__ = "cold_storage_units"

    unit_code: str
    unit_name: str
    capacity: int
    current_occupancy: int = 0
    temperature: Optional[str] = None
    humidity: Optional[str] = None
    location: Optional[str] = None
    is_active: bool = True


class ColdStorageTransaction(RecordBase, table=True):
    __tablename__ = "cold_storage_transactions"

    transaction_number: str
    # unit_id and item_id reference other records by id only
    unit_id: str
    item_id: str
    transaction_type: str
    quantity: int
    temperature: Optional[str] = None
    entry_date: Optional[datetime] = utc_column(default=None)
    exit_date: Optional[datetime] = utc_column(default=None)
    description: Optional[str] = None
