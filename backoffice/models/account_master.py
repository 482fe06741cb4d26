from typing import Optional

from backoffice.models.base import RecordBase


class AccountMaster(RecordBase, table=True):
    __tablename__ = "account_masters"

    account_code: str
    account_name: str
    account_type: str
    # Free-text reference to another account; never checked
    parent_account: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True
