from typing import Optional

from backoffice.models.base import RecordBase


class InventoryMaster(RecordBase, table=True):
    __tablename__ = "inventory_masters"

    # item_code is not unique: duplicates are accepted
    item_code: str
    item_name: str
    category: str
    unit: str
    description: Optional[str] = None
    minimum_stock: int = 0
    maximum_stock: int = 0
    reorder_level: int = 0
    unit_price: str
    is_active: bool = True
