from typing import Optional

from backoffice.models.base import RecordBase


class Company(RecordBase, table=True):
    __tablename__ = "companies"

    name: str
    code: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    is_active: bool = True
