"""
Transaction queries and dashboard views (orchestration).

Flow per request:
1) Build a `TransactionFilter` from month (+ search for the listing)
2) Read matching records from the store
3) Paginate (listing) or reduce (statistics / bar chart / pie chart)

The aggregate views always ignore `search`; only the listing applies it.
"""

from __future__ import annotations

import asyncio
import math

from core.errors import InvalidArgument

from . import aggregation
from .filters import TransactionFilter
from .repository import TransactionStore

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
# Keeps (page - 1) * per_page well inside a Postgres bigint OFFSET.
MAX_PAGE = 1_000_000
MAX_PER_PAGE = 1_000


async def list_transactions(
    store: TransactionStore,
    *,
    month: int | str | None = None,
    search: str | None = "",
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
) -> dict:
    if not 1 <= page <= MAX_PAGE:
        raise InvalidArgument(f"page must be between 1 and {MAX_PAGE}.")
    if not 1 <= per_page <= MAX_PER_PAGE:
        raise InvalidArgument(f"perPage must be between 1 and {MAX_PER_PAGE}.")

    query = TransactionFilter.build(month=month, search=search)
    items, total = await store.page(query, offset=(page - 1) * per_page, limit=per_page)
    return {
        "transactions": [item.model_dump(mode="json") for item in items],
        "totalPages": math.ceil(total / per_page),
    }


async def _month_records(store: TransactionStore, month: int | str | None) -> list:
    return await store.find(TransactionFilter.build(month=month).month_only())


async def statistics(store: TransactionStore, *, month: int | str | None = None) -> dict:
    return aggregation.sales_statistics(await _month_records(store, month))


async def bar_chart(store: TransactionStore, *, month: int | str | None = None) -> dict[str, int]:
    return aggregation.price_histogram(await _month_records(store, month))


async def pie_chart(store: TransactionStore, *, month: int | str | None = None) -> dict[str, int]:
    return aggregation.category_counts(await _month_records(store, month))


async def combined(
    store: TransactionStore,
    *,
    month: int | str | None = None,
    search: str | None = "",
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
) -> dict:
    """
    All four views for one month in a single response.

    The parts run concurrently; the first failure propagates and no partial
    result is returned.
    """
    transactions, stats, bars, pie = await asyncio.gather(
        list_transactions(store, month=month, search=search, page=page, per_page=per_page),
        statistics(store, month=month),
        bar_chart(store, month=month),
        pie_chart(store, month=month),
    )
    return {
        "transactions": transactions,
        "statistics": stats,
        "barChart": bars,
        "pieChart": pie,
    }
