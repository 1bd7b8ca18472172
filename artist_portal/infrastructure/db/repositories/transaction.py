from __future__ import annotations

from typing import Callable

from sqlalchemy.engine import Connection, Engine

from artist_portal.application.ports.transaction_port import TResult, TransactionPort, TransactionScope
from artist_portal.infrastructure.db.engine import BEGIN_IMMEDIATE_OPTION

from .activity_repository import SqlActivityRepository
from .bookings_repository import SqlBookingsRepository
from .catalog_repository import SqlCatalogRepository
from .projects_repository import SqlProjectsRepository


class SqlTransactionScope:
    def __init__(self, connection: Connection):
        self.projects = SqlProjectsRepository(connection=connection)
        self.catalog = SqlCatalogRepository(connection=connection)
        self.activities = SqlActivityRepository(connection=connection)
        self.bookings = SqlBookingsRepository(connection=connection)


class SqlTransactionRunner(TransactionPort):
    """Commits when ``fn`` returns, rolls back everything when it raises."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def execute_in_transaction(self, fn: Callable[[TransactionScope], TResult]) -> TResult:
        with self._engine.connect() as conn:
            conn.execution_options(**{BEGIN_IMMEDIATE_OPTION: True})
            with conn.begin():
                return fn(SqlTransactionScope(conn))
