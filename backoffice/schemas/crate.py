from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, StoreInt, partial_model


class CrateCreate(ApiSchema):
    crate_id: str
    customer_id: Optional[str] = None
    supplier_id: Optional[str] = None
    crate_type: str
    quantity: StoreInt
    # available, assigned, damaged
    status: str = "available"


CrateUpdate = partial_model(CrateCreate)


class CrateRead(CrateCreate):
    id: str
    created_at: datetime
    last_updated: Optional[datetime] = None
