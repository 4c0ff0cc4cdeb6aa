"""Statistics, price histogram and category counts."""

from __future__ import annotations

import pytest

from tests.fakes import make_record
from transactions.aggregation import (
    BUCKET_LABELS,
    MISSING_CATEGORY,
    category_counts,
    price_bucket,
    price_histogram,
    sales_statistics,
)


def test_bucket_labels_are_fixed_and_ordered() -> None:
    assert BUCKET_LABELS == (
        "0-100",
        "101-200",
        "201-300",
        "301-400",
        "401-500",
        "501-600",
        "601-700",
        "701-800",
        "801-900",
        "901-above",
    )


@pytest.mark.parametrize(
    ("price", "label"),
    [
        (0, "0-100"),
        (100, "0-100"),
        (100.5, "101-200"),
        (101, "101-200"),
        (200, "101-200"),
        (550, "501-600"),
        (900, "801-900"),
        (900.01, "901-above"),
        (25000, "901-above"),
        (None, "0-100"),
    ],
)
def test_price_bucket_boundaries(price, label) -> None:
    assert price_bucket(price) == label


def test_every_price_lands_in_exactly_one_bucket() -> None:
    prices = [p / 4 for p in range(0, 4000 * 4)]

    histogram = price_histogram(make_record(price=p) for p in prices)

    assert list(histogram) == list(BUCKET_LABELS)
    assert sum(histogram.values()) == len(prices)


def test_statistics_only_sum_sold_prices() -> None:
    records = [
        make_record(price=10, sold=True),
        make_record(price=20.5, sold=True),
        make_record(price=999, sold=False),
        make_record(price=5, sold=None),
    ]

    stats = sales_statistics(records)

    assert stats == {"totalSaleAmount": 30.5, "totalSoldItems": 2, "totalNotSoldItems": 2}
    assert stats["totalSoldItems"] + stats["totalNotSoldItems"] == len(records)


def test_category_counts_keep_observed_categories_only() -> None:
    records = [
        make_record(category="electronics"),
        make_record(category="jewelery"),
        make_record(category="electronics"),
        make_record(category=None),
    ]

    assert category_counts(records) == {"electronics": 2, "jewelery": 1, MISSING_CATEGORY: 1}


def test_empty_input_gives_zero_forms() -> None:
    assert sales_statistics([]) == {"totalSaleAmount": 0, "totalSoldItems": 0, "totalNotSoldItems": 0}
    assert price_histogram([]) == dict.fromkeys(BUCKET_LABELS, 0)
    assert category_counts([]) == {}
