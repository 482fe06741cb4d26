from typing import Optional

from backoffice.models.base import RecordBase


class Supplier(RecordBase, table=True):
    __tablename__ = "suppliers"

    supplier_code: str
    supplier_name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    payment_terms: Optional[str] = None
    is_active: bool = True
