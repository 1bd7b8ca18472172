from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Connection, Engine


class SqlRepository:
    """Runs against its own engine connections, or against a caller's open transaction."""

    def __init__(self, engine: Engine | None = None, *, connection: Connection | None = None):
        if engine is None and connection is None:
            raise ValueError("engine or connection is required")
        self._engine = engine
        self._connection = connection

    @contextmanager
    def _read(self) -> Iterator[Connection]:
        if self._connection is not None:
            yield self._connection
            return
        with self._engine.connect() as conn:
            yield conn

    @contextmanager
    def _write(self) -> Iterator[Connection]:
        if self._connection is not None:
            yield self._connection
            return
        with self._engine.begin() as conn:
            yield conn
