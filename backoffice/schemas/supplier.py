from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, partial_model


class SupplierCreate(ApiSchema):
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


SupplierUpdate = partial_model(SupplierCreate)


class SupplierRead(SupplierCreate):
    id: str
    created_at: datetime
