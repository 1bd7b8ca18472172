from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache

from sqlalchemy import DateTime, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    pass


class UtcDateTime(TypeDecorator):
    """Timezone-aware UTC datetimes on every backend.

    SQLite stores naive values, so binds are normalized to UTC and results get
    the UTC tzinfo re-attached.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


SQLITE_BUSY_TIMEOUT_SECONDS = 15
BEGIN_IMMEDIATE_OPTION = "sqlite_begin_immediate"


def _is_memory_sqlite(dsn: str) -> bool:
    return dsn in {"sqlite://", "sqlite:///:memory:"} or "mode=memory" in dsn


def create_db_engine(dsn: str) -> Engine:
    if not dsn.startswith("sqlite"):
        return create_engine(dsn, future=True, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT_SECONDS}}
    if _is_memory_sqlite(dsn):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(dsn, future=True, **kwargs)

    # pysqlite's implicit BEGIN handling breaks SAVEPOINT; take over transaction control.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        # Write transactions take the RESERVED lock up front so concurrent writers
        # queue on the busy timeout instead of deadlocking on lock upgrade.
        if conn.get_execution_options().get(BEGIN_IMMEDIATE_OPTION):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")

    return engine


@lru_cache(maxsize=4)
def get_engine(dsn: str) -> Engine:
    return create_db_engine(dsn)


def create_schema(engine: Engine) -> None:
    from artist_portal.infrastructure.db.models import portal  # noqa: F401

    Base.metadata.create_all(engine)
