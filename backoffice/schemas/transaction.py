from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, DecimalString, UtcDateTime, partial_model


class TransactionCreate(ApiSchema):
    transaction_number: str
    transaction_type: str
    account_id: str
    amount: DecimalString
    description: Optional[str] = None
    reference_number: Optional[str] = None
    transaction_date: UtcDateTime


TransactionUpdate = partial_model(TransactionCreate)


class TransactionRead(TransactionCreate):
    id: str
    created_at: datetime
