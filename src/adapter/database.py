"""Async engine construction

SQLite ignores foreign keys unless every connection opts in, so engines
for SQLite URLs get the pragma on connect. An invoice can then never be
inserted for a customer deleted in the meantime, as on PostgreSQL.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_engine(db_uri: str, **kwargs) -> AsyncEngine:
    engine = create_async_engine(db_uri, echo=False, future=True, **kwargs)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_conn, _):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine
