from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from backoffice.utils.dates import utcnow


def new_record_id() -> str:
    return str(uuid4())


def utc_column(**kwargs):
    """Datetime column holding naive UTC values (see ``utils.dates.normalize_dt``)."""
    return Field(sa_type=DateTime(timezone=False), **kwargs)


class RecordBase(SQLModel):
    """Server-assigned fields shared by every stored record."""

    id: str = Field(default_factory=new_record_id, primary_key=True)
    created_at: datetime = utc_column(default_factory=utcnow, index=True)
