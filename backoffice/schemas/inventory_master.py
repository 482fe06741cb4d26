from datetime import datetime
from typing import Optional

from pydantic import Field

from backoffice.schemas.base import ApiSchema, DecimalString, StoreInt, partial_model


class InventoryMasterCreate(ApiSchema):
    item_code: str
    item_name: str
    category: str
    unit: str
    description: Optional[str] = None
    minimum_stock: StoreInt = 0
    maximum_stock: StoreInt = 0
    reorder_level: StoreInt = 0
    unit_price: DecimalString
    is_active: bool = True


InventoryMasterUpdate = partial_model(InventoryMasterCreate)


class InventoryMasterRead(InventoryMasterCreate):
    id: str
    created_at: datetime


class LowStockItem(InventoryMasterRead):
    current_stock: int = Field(0, description="IN minus OUT stock movements")
