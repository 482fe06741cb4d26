from typing import TYPE_CHECKING

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from backoffice.core.config import DATABASE_URL, SQL_ECHO

if TYPE_CHECKING:
    from backoffice.storage.store import ResourceStore

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO):
    if url.startswith("sqlite"):
        # Requests are served from a thread pool; the store serializes access itself
        connect_args = {"check_same_thread": False}
        if url in IN_MEMORY_URLS:
            # One shared connection, otherwise every connection sees its own empty database
            return create_engine(url, echo=echo, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, echo=echo, connect_args=connect_args)
    return create_engine(url, echo=echo)


def create_db_and_tables(engine):
    from backoffice import resources  # noqa: F401  registers every table model
    SQLModel.metadata.create_all(engine)


def drop_db_and_tables(engine):
    from backoffice import resources  # noqa: F401
    SQLModel.metadata.drop_all(engine)


def get_store(request: Request) -> "ResourceStore":
    return request.app.state.store
