from datetime import datetime
from typing import Optional

from backoffice.models.base import RecordBase, utc_column


class StockTransaction(RecordBase, table=True):
    __tablename__ = "stock_transactions"

    transaction_number: str
    item_id: str
    transaction_type: str
    quantity: int
    unit_price: Optional[str] = None
    total_value: Optional[str] = None
    reference_number: Optional[str] = None
    description: Optional[str] = None
    transaction_date: datetime = utc_column()
