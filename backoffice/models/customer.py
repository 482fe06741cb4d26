from typing import Optional

from backoffice.models.base import RecordBase


class Customer(RecordBase, table=True):
    __tablename__ = "customers"

    customer_code: str
    customer_name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    credit_limit: str = "0.00"
    is_active: bool = True
