from datetime import datetime
from typing import Optional

from sqlmodel import Field

from backoffice.models.base import RecordBase, utc_column


class Crate(RecordBase, table=True):
    __tablename__ = "crates"

    crate_id: str = Field(index=True)
    # Held by a customer or a supplier, or by neither while in the yard
    customer_id: Optional[str] = None
    supplier_id: Optional[str] = None
    crate_type: str
    quantity: int
    status: str = Field(default="available")
    last_updated: Optional[datetime] = utc_column(default=None)
