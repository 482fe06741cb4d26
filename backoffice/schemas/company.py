from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, partial_model


class CompanyCreate(ApiSchema):
    name: str
    code: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    is_active: bool = True


CompanyUpdate = partial_model(CompanyCreate)


class CompanyRead(CompanyCreate):
    id: str
    created_at: datetime
