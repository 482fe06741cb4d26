# backoffice/storage/store.py

import logging
import threading
from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from backoffice.database import build_engine, create_db_and_tables, drop_db_and_tables
from backoffice.models.base import new_record_id
from backoffice.utils.dates import utcnow

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=SQLModel)

# Assigned by the store, never taken from the caller
SERVER_FIELDS = ("id", "created_at")


class Collection:
    """CRUD view over the records of one entity type."""

    def __init__(self, store: "ResourceStore", model: Type[RecordT]):
        self._store = store
        self.model = model

    def list(self) -> List[RecordT]:
        with self._store.session() as session:
            return list(session.exec(select(self.model).order_by(self.model.created_at)).all())

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._store.session() as session:
            return session.get(self.model, record_id)

    def create(self, fields: Dict[str, Any]) -> RecordT:
        values = {key: value for key, value in fields.items() if key not in SERVER_FIELDS}
        with self._store.session() as session:
            record = self.model(**values, id=new_record_id(), created_at=utcnow())
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[RecordT]:
        with self._store.session() as session:
            record = session.get(self.model, record_id)
            if record is None:
                return None
            for key, value in fields.items():
                if key in SERVER_FIELDS:
                    continue
                setattr(record, key, value)
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    def delete(self, record_id: str) -> bool:
        with self._store.session() as session:
            record = session.get(self.model, record_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True

    def count(self) -> int:
        with self._store.session() as session:
            return session.exec(select(func.count()).select_from(self.model)).one()


class ResourceStore:
    """
    Holds one collection per entity type on top of a SQLModel engine.

    The default engine is an in-memory SQLite database, so nothing survives
    the process. Every operation runs under a single lock: requests are
    served from a thread pool and the in-memory database shares one
    connection.
    """

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else build_engine()
        self._lock = threading.RLock()
        self._collections: Dict[type, Collection] = {}
        create_db_and_tables(self.engine)

    @classmethod
    def in_memory(cls) -> "ResourceStore":
        return cls(build_engine("sqlite://", echo=False))

    def session(self):
        return _LockedSession(self._lock, self.engine)

    def collection(self, model: Type[RecordT]) -> Collection:
        with self._lock:
            if model not in self._collections:
                self._collections[model] = Collection(self, model)
            return self._collections[model]

    def reset(self) -> None:
        with self._lock:
            drop_db_and_tables(self.engine)
            create_db_and_tables(self.engine)
        logger.info("Store reset")

    def close(self) -> None:
        self.engine.dispose()


class _LockedSession:
    """Context manager yielding a Session while holding the store lock."""

    def __init__(self, lock, engine):
        self._lock = lock
        self._engine = engine
        self._session: Optional[Session] = None

    def __enter__(self) -> Session:
        self._lock.acquire()
        try:
            # Records stay readable once handed back to the router
            self._session = Session(self._engine, expire_on_commit=False)
        except Exception:
            self._lock.release()
            raise
        return self._session

    def __exit__(self, exc_type, exc, tb):
        try:
            self._session.close()
        finally:
            self._session = None
            self._lock.release()
        return False
