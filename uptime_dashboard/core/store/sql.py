import logging
import threading
from contextlib import nullcontext
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import Column, Table, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from uptime_dashboard.core.database import Base, create_session_factory
from uptime_dashboard.core.exceptions import IdentityUnavailable, StoreUnavailable
from uptime_dashboard.core.store.base import Record, RecordStore
from uptime_dashboard.models import Check, Event, Notification, Resource
from uptime_dashboard.schemas.common import Identity

logger = logging.getLogger(__name__)

TABLES: Dict[str, Table] = {
    model.__tablename__: model.__table__
    for model in (Resource, Check, Event, Notification)
}


def _column(table: Table, name: str) -> Column:
    for column in table.columns:
        if column.name == name:
            return column
    raise StoreUnavailable(f"Unknown column {table.name}.{name}")


def _row_to_record(table: Table, row) -> Record:
    return {column.name: row._mapping[column] for column in table.columns}


def _values(table: Table, record: Mapping[str, Any]) -> Dict[Column, Any]:
    known = {column.name: column for column in table.columns}
    return {known[key]: value for key, value in record.items() if key in known}


class SqlRecordStore(RecordStore):
    """
    Record store backed by SQLAlchemy tables whose column names are the
    record keys. Sessions are synchronous and run in the threadpool.
    """

    def __init__(
        self,
        engine: Engine,
        user_id: Optional[str] = None,
        session_factory: Optional[sessionmaker] = None,
        lock: Optional[threading.Lock] = None,
    ):
        self.engine = engine
        self.user_id = user_id
        self.session_factory = session_factory or create_session_factory(engine)
        # SQLite connections are shared between worker threads
        if lock is None and engine.dialect.name == "sqlite":
            lock = threading.Lock()
        self._lock = lock

    def for_user(self, user_id: Optional[str]) -> "SqlRecordStore":
        """Same database, different caller."""
        return SqlRecordStore(
            self.engine,
            user_id=user_id,
            session_factory=self.session_factory,
            lock=self._lock,
        )

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def _guard(self):
        return self._lock if self._lock is not None else nullcontext()

    def _table(self, name: str) -> Table:
        try:
            return TABLES[name]
        except KeyError:
            raise StoreUnavailable(f"Unknown table: {name}")

    # ===============================
    # SYNC OPERATIONS
    # ===============================
    def _list_sync(
        self,
        table_name: str,
        where: Optional[Mapping[str, Any]],
        order_by: Optional[str],
        descending: bool,
        limit: Optional[int],
    ) -> List[Record]:
        table = self._table(table_name)
        query = select(table)
        for key, value in (where or {}).items():
            query = query.where(_column(table, key) == value)
        if order_by:
            column = _column(table, order_by)
            query = query.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            query = query.limit(limit)

        with self._guard(), self.session_factory() as db:
            rows = db.execute(query).all()
        return [_row_to_record(table, row) for row in rows]

    def _get(self, db: Session, table: Table, id: str) -> Optional[Record]:
        row = db.execute(select(table).where(_column(table, "id") == id)).first()
        return _row_to_record(table, row) if row is not None else None

    def _create_sync(self, table_name: str, record: Mapping[str, Any]) -> Record:
        table = self._table(table_name)
        with self._guard(), self.session_factory() as db:
            db.execute(insert(table).values(_values(table, record)))
            db.commit()
            return self._get(db, table, record["id"])

    def _match(self, table: Table, id: str, where: Optional[Mapping[str, Any]]) -> list:
        return [_column(table, "id") == id] + [
            _column(table, key) == value for key, value in (where or {}).items()
        ]

    def _update_sync(
        self,
        table_name: str,
        id: str,
        record: Mapping[str, Any],
        where: Optional[Mapping[str, Any]],
    ) -> Record:
        table = self._table(table_name)
        with self._guard(), self.session_factory() as db:
            result = db.execute(
                update(table)
                .where(*self._match(table, id, where))
                .values(_values(table, record))
            )
            if result.rowcount == 0:
                db.rollback()
                raise StoreUnavailable(f"No matching {table_name} record with id {id}")
            db.commit()
            return self._get(db, table, id)

    def _delete_sync(
        self, table_name: str, id: str, where: Optional[Mapping[str, Any]]
    ) -> None:
        table = self._table(table_name)
        with self._guard(), self.session_factory() as db:
            db.execute(delete(table).where(*self._match(table, id, where)))
            db.commit()

    # ===============================
    # ASYNC INTERFACE
    # ===============================
    async def list(
        self,
        table: str,
        *,
        where: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Record]:
        return await run_in_threadpool(
            self._list_sync, table, where, order_by, descending, limit
        )

    async def create(self, table: str, record: Mapping[str, Any]) -> Record:
        return await run_in_threadpool(self._create_sync, table, record)

    async def update(
        self,
        table: str,
        id: str,
        record: Mapping[str, Any],
        *,
        where: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        return await run_in_threadpool(self._update_sync, table, id, record, where)

    async def delete(
        self, table: str, id: str, *, where: Optional[Mapping[str, Any]] = None
    ) -> None:
        await run_in_threadpool(self._delete_sync, table, id, where)

    async def current_user(self) -> Identity:
        if not self.user_id:
            raise IdentityUnavailable("No user bound to the SQL record store")
        return Identity(id=self.user_id)
