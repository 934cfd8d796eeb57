"""
Storage client.

Wraps a SQLAlchemy engine and exposes a single parameterized execution call.
Statements are written with positional ``$1..$N`` placeholders; they are
rewritten to named bind parameters before reaching the driver, so the same
SQL runs against PostgreSQL and SQLite.
"""

import logging
import re
from typing import Any, Dict, List, NamedTuple, Sequence, Tuple, Union

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

_PLACEHOLDER = re.compile(r"\$(\d+)")


class QueryResult(NamedTuple):
    """Rows returned by a statement, as column-name keyed dicts."""
    rows: List[Dict[str, Any]]


def to_named_params(sql: str, params: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite ``$N`` placeholders to ``:pN`` binds.

    Args:
        sql: Statement using 1-based positional placeholders
        params: Values, where params[0] binds to $1

    Returns:
        Tuple of (rewritten SQL, bind dict)
    """
    statement = _PLACEHOLDER.sub(lambda m: f":p{m.group(1)}", sql)
    binds = {f"p{i}": value for i, value in enumerate(params, start=1)}
    return statement, binds


class Database:
    """
    Explicitly owned storage client.

    One instance is created per application (see the lifespan in main.py)
    and handed to the repository functions. Each ``query`` call checks a
    connection out of the pool, runs one statement in its own transaction
    and returns the connection.
    """

    def __init__(self, bind: Union[str, Engine], **engine_kwargs: Any) -> None:
        if isinstance(bind, Engine):
            self.engine = bind
        else:
            self.engine = create_engine(bind, **engine_kwargs)

    def query(self, sql: str, params: Sequence[Any] = ()) -> QueryResult:
        statement, binds = to_named_params(sql, params)
        logger.debug("Executing statement", extra={"sql": statement})
        with self.engine.begin() as conn:
            result = conn.execute(text(statement), binds)
            rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
        return QueryResult(rows=rows)

    def dispose(self) -> None:
        """Close all pooled connections."""
        self.engine.dispose()


def create_database(url: str) -> Database:
    """Build the application storage client with production pool settings."""
    return Database(
        url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,  # Connection pool size
        max_overflow=20  # Allow up to 20 connections beyond pool_size
    )


def get_db(request: Request) -> Database:
    """
    Dependency function returning the application's storage client.
    Used in FastAPI endpoints with Depends(get_db)
    """
    return request.app.state.db
