from datetime import datetime
from typing import Optional

from backoffice.schemas.base import (
    ApiSchema,
    DecimalString,
    OptionalUtcDateTime,
    StoreInt,
    partial_model,
)


class ColdStorageUnitCreate(ApiSchema):
    unit_code: str
    unit_name: str
    capacity: StoreInt
    current_occupancy: StoreInt = 0
    temperature: Optional[DecimalString] = None
    humidity: Optional[DecimalString] = None
    location: Optional[str] = None
    is_active: bool = True


ColdStorageUnitUpdate = partial_model(ColdStorageUnitCreate)


class ColdStorageUnitRead(ColdStorageUnitCreate):
    id: str
    created_at: datetime


class ColdStorageTransactionCreate(ApiSchema):
    transaction_number: str
    unit_id: str
    item_id: str
    transaction_type: str
    quantity: StoreInt
    temperature: Optional[DecimalString] = None
    entry_date: OptionalUtcDateTime = None
    exit_date: OptionalUtcDateTime = None
    description: Optional[str] = None


ColdStorageTransactionUpdate = partial_model(ColdStorageTransactionCreate)


class ColdStorageTransactionRead(ColdStorageTransactionCreate):
    id: str
    created_at: datetime
