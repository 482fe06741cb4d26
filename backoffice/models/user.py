from sqlmodel import Field

from backoffice.models.base import RecordBase


class User(RecordBase, table=True):
    __tablename__ = "users"

    username: str = Field(index=True)
    email: str = Field(index=True)
    hashed_password: str
    role: str = Field(default="user")
    is_active: bool = True
