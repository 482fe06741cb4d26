from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, DecimalString, partial_model


class CustomerCreate(ApiSchema):
    customer_code: str
    customer_name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    credit_limit: DecimalString = "0.00"
    is_active: bool = True


CustomerUpdate = partial_model(CustomerCreate)


class CustomerRead(CustomerCreate):
    id: str
    created_at: datetime
