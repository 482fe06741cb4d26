from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, DecimalString, StoreInt, UtcDateTime, partial_model


class StockTransactionCreate(ApiSchema):
    transaction_number: str
    item_id: str
    transaction_type: str
    quantity: StoreInt
    unit_price: Optional[DecimalString] = None
    total_value: Optional[DecimalString] = None
    reference_number: Optional[str] = None
    description: Optional[str] = None
    transaction_date: UtcDateTime


StockTransactionUpdate = partial_model(StockTransactionCreate)


class StockTransactionRead(StockTransactionCreate):
    id: str
    created_at: datetime
