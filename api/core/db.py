"""
Async database access helpers (raw SQL) using asyncpg.

Only used when `STORE_BACKEND=postgres`. The pool is created in the FastAPI
lifespan and closed on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Driver failures surface as `core.errors.StoreError`.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .errors import StoreError

_pool: asyncpg.Pool | None = None

# What asyncpg raises for a broken query or connection.
DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    try:
        _pool = await asyncpg.create_pool(
            dsn=database_url(),
            min_size=1,
            max_size=5,
            command_timeout=30,
        )
    except DRIVER_ERRORS as e:
        raise StoreError(f"Could not connect to the database: {e}") from e


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise StoreError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except DRIVER_ERRORS as e:
        raise StoreError(f"Query failed: {e}") from e
    return [dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    try:
        await pool().execute(sql, *args)
    except DRIVER_ERRORS as e:
        raise StoreError(f"Statement failed: {e}") from e


@asynccontextmanager
async def transaction(**options: Any) -> AsyncIterator[asyncpg.Connection]:
    """
    Yield a connection inside a transaction; rolled back if the block raises.

    `options` go to `Connection.transaction()` (isolation, readonly, ...).
    """
    try:
        async with pool().acquire() as conn:  # type: asyncpg.Connection
            async with conn.transaction(**options):
                yield conn
    except DRIVER_ERRORS as e:
        raise StoreError(f"Transaction failed: {e}") from e
