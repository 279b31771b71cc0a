import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql.expression import Executable

from product_service.config import Settings

logger = logging.getLogger(__name__)


class QueryExecutionError(Exception):
    """Raised when a connection or statement fails inside the pool."""


@dataclass
class QueryResult:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0

    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None


def _error_message(exc: Exception) -> str:
    # DBAPIError wraps the driver exception; its own str() embeds the SQL text.
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class Database:
    """
    Bounded pool of database connections with a single execution operation.

    Every call to execute() checks out a connection, runs the statement in
    its own transaction and returns the connection to the pool.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def connect(cls, settings: Settings) -> "Database":
        engine = create_async_engine(
            settings.database_url_resolved,
            echo=False,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_recycle=settings.db_pool_idle_seconds,
        )
        logger.info(
            "Database pool created (host=%s, size=%s)",
            engine.url.host or engine.url.database,
            settings.db_pool_size,
        )
        return cls(engine)

    async def execute(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> QueryResult:
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement, params or {})
                rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
                return QueryResult(rows=rows, rowcount=result.rowcount)
        except (SQLAlchemyError, OSError) as exc:
            raise QueryExecutionError(_error_message(exc)) from exc

    async def run_sync(self, fn) -> None:
        """Run a synchronous callable (e.g. metadata.create_all) on a pooled connection."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(fn)
        except (SQLAlchemyError, OSError) as exc:
            raise QueryExecutionError(_error_message(exc)) from exc

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database pool disposed")


# Dependency for FastAPI to get the process-wide pool
def get_database(request: Request) -> Database:
    return request.app.state.db
