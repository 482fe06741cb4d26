from datetime import datetime
from typing import Optional

from backoffice.models.base import RecordBase, utc_column


class Transaction(RecordBase, table=True):
    __tablename__ = "transactions"

    transaction_number: str
    transaction_type: str
    # Points at an AccountMaster id, without a foreign key constraint
    account_id: str
    amount: str
    description: Optional[str] = None
    reference_number: Optional[str] = None
    transaction_date: datetime = utc_column()
