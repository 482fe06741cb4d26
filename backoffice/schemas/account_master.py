from datetime import datetime
from typing import Optional

from backoffice.schemas.base import ApiSchema, partial_model


class AccountMasterCreate(ApiSchema):
    account_code: str
    account_name: str
    account_type: str
    parent_account: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


AccountMasterUpdate = partial_model(AccountMasterCreate)


class AccountMasterRead(AccountMasterCreate):
    id: str
    created_at: datetime
