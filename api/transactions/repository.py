"""
Transaction record stores.

Two interchangeable backends implement `TransactionStore`:
- `InMemoryTransactionStore`: an immutable snapshot swapped on each ingest.
- `PostgresTransactionStore`: raw SQL over the asyncpg pool in `core.db`.

The active store is created once per process in the FastAPI lifespan
(`init_store`) and handed to routes through the `get_store` dependency.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from core import config, db
from core.errors import StoreError

from .filters import TransactionFilter
from .schemas import Transaction

logger = logging.getLogger(__name__)


class TransactionStore(Protocol):
    async def replace_all(self, records: Sequence[Transaction]) -> int:
        """
        Atomically replace every stored record. Returns the new record count.
        """
        ...

    async def find(self, query: TransactionFilter) -> list[Transaction]:
        ...

    async def page(self, query: TransactionFilter, *, offset: int, limit: int) -> tuple[list[Transaction], int]:
        """
        Return (slice in insertion order, total matches), read from one snapshot.
        """
        ...


class InMemoryTransactionStore:
    def __init__(self, records: Sequence[Transaction] = ()) -> None:
        self._snapshot: tuple[Transaction, ...] = tuple(records)

    async def replace_all(self, records: Sequence[Transaction]) -> int:
        # Readers hold a reference to the old tuple; one assignment swaps datasets.
        self._snapshot = tuple(records)
        return len(self._snapshot)

    async def find(self, query: TransactionFilter) -> list[Transaction]:
        return [r for r in self._snapshot if query.matches(r)]

    async def page(self, query: TransactionFilter, *, offset: int, limit: int) -> tuple[list[Transaction], int]:
        matches = [r for r in self._snapshot if query.matches(r)]
        return matches[offset : offset + limit], len(matches)


_COLUMNS = "id, title, description, price, date_of_sale, category, sold"

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
  position bigserial PRIMARY KEY,
  id bigint,
  title text,
  description text,
  price double precision,
  date_of_sale timestamptz,
  sale_month smallint,
  category text,
  sold boolean
)
"""


def _to_row(record: Transaction) -> tuple[Any, ...]:
    return (
        record.id,
        record.title,
        record.description,
        record.price,
        record.dateOfSale,
        record.sale_month,
        record.category,
        record.sold,
    )


def _from_row(row: dict[str, Any]) -> Transaction:
    return Transaction(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        price=row["price"],
        dateOfSale=row["date_of_sale"],
        category=row["category"],
        sold=row["sold"],
    )


def where_clause(query: TransactionFilter) -> tuple[str, list[Any]]:
    """
    Render a filter as a parameterised WHERE clause.

    Search uses strpos() on lowered text so the user's string is a literal
    substring, never a LIKE/regex pattern.
    """
    clauses: list[str] = []
    args: list[Any] = []

    if query.month is not None:
        args.append(query.month)
        clauses.append(f"sale_month = ${len(args)}")

    if query.search:
        args.append(query.search.lower())
        n = len(args)
        clauses.append(
            "("
            f"strpos(lower(coalesce(title, '')), ${n}) > 0"
            f" OR strpos(lower(coalesce(description, '')), ${n}) > 0"
            f" OR strpos(coalesce(price::text, ''), ${n}) > 0"
            ")"
        )

    if not clauses:
        return "", args
    return "WHERE " + " AND ".join(clauses), args


class PostgresTransactionStore:
    async def ensure_schema(self) -> None:
        await db.execute(_SCHEMA_SQL)

    async def replace_all(self, records: Sequence[Transaction]) -> int:
        rows = [_to_row(r) for r in records]
        # Readers keep seeing the old rows until this transaction commits.
        async with db.transaction() as conn:
            await conn.execute("DELETE FROM transactions")
            if rows:
                await conn.executemany(
                    """
                    INSERT INTO transactions
                      (id, title, description, price, date_of_sale, sale_month, category, sold)
                    VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
                    """,
                    rows,
                )
        return len(rows)

    async def find(self, query: TransactionFilter) -> list[Transaction]:
        where, args = where_clause(query)
        rows = await db.fetch_all(
            f"SELECT {_COLUMNS} FROM transactions {where} ORDER BY position",
            *args,
        )
        return [_from_row(r) for r in rows]

    async def page(self, query: TransactionFilter, *, offset: int, limit: int) -> tuple[list[Transaction], int]:
        where, args = where_clause(query)
        n = len(args)
        async with db.transaction(isolation="repeatable_read", readonly=True) as conn:
            total = await conn.fetchval(f"SELECT count(*) FROM transactions {where}", *args)
            rows = await conn.fetch(
                f"""
                SELECT {_COLUMNS}
                FROM transactions
                {where}
                ORDER BY position
                LIMIT ${n + 1}
                OFFSET ${n + 2}
                """,
                *args,
                limit,
                offset,
            )
        return [_from_row(dict(r)) for r in rows], int(total or 0)


_store: TransactionStore | None = None


async def init_store() -> TransactionStore:
    global _store
    if _store is not None:
        return _store

    backend = config.store_backend()
    if backend == "postgres":
        await db.init_pool()
        store = PostgresTransactionStore()
        await store.ensure_schema()
        _store = store
    else:
        _store = InMemoryTransactionStore()

    logger.info("store_ready backend=%s", backend)
    return _store


async def close_store() -> None:
    global _store
    if isinstance(_store, PostgresTransactionStore):
        await db.close_pool()
    _store = None


def get_store() -> TransactionStore:
    """
    FastAPI dependency returning the process-wide store.
    """
    if _store is None:
        raise StoreError("Record store is not initialized.")
    return _store
