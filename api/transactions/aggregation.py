"""
Dashboard reductions over a month-filtered record set.

All three are pure functions of the records; an empty input yields the zero
form of each view.
"""

from __future__ import annotations

import math
from typing import Iterable

from .schemas import Transaction

# (inclusive upper bound, label); anything above the last bound is OPEN_BUCKET.
PRICE_BUCKETS: tuple[tuple[int, str], ...] = (
    (100, "0-100"),
    (200, "101-200"),
    (300, "201-300"),
    (400, "301-400"),
    (500, "401-500"),
    (600, "501-600"),
    (700, "601-700"),
    (800, "701-800"),
    (900, "801-900"),
)
OPEN_BUCKET = "901-above"
BUCKET_LABELS: tuple[str, ...] = tuple(label for _, label in PRICE_BUCKETS) + (OPEN_BUCKET,)

# Pie-chart key for records without a category.
MISSING_CATEGORY = "null"


def price_bucket(price: float | None) -> str:
    p = price or 0.0
    for upper, label in PRICE_BUCKETS:
        if p <= upper:
            return label
    return OPEN_BUCKET


def sales_statistics(records: Iterable[Transaction]) -> dict:
    sold_prices: list[float] = []
    not_sold = 0
    for record in records:
        if record.sold:
            sold_prices.append(record.price or 0.0)
        else:
            not_sold += 1

    return {
        "totalSaleAmount": math.fsum(sold_prices),
        "totalSoldItems": len(sold_prices),
        "totalNotSoldItems": not_sold,
    }


def price_histogram(records: Iterable[Transaction]) -> dict[str, int]:
    counts = dict.fromkeys(BUCKET_LABELS, 0)
    for record in records:
        counts[price_bucket(record.price)] += 1
    return counts


def category_counts(records: Iterable[Transaction]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for record in records:
        key = record.category if record.category is not None else MISSING_CATEGORY
        counts[key] = counts.get(key, 0) + 1
    return counts
