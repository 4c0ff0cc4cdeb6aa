"""
Record filters: month-of-year and free-text search.

A `TransactionFilter` is a plain value with two independent clauses. The
in-memory store evaluates it with `matches()`; the Postgres store renders the
same clauses to SQL (see `repository.py`). Neither side treats the search
text as a pattern language.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .schemas import Transaction

# Selector value for month text we could not understand; matches no record.
NO_MONTH = 0

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def parse_month(value: int | str | None) -> int | None:
    """
    Normalize a month selector.

    Returns None for "no restriction" (absent or blank), otherwise 1..12 or
    NO_MONTH. Numbers outside 1..12 and unknown text become NO_MONTH, so they
    match nothing. Names and three-letter abbreviations are accepted in any
    case.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value if 1 <= value <= 12 else NO_MONTH

    text = value.strip().lower()
    if not text:
        return None
    if text.isdecimal():
        number = int(text)
        return number if 1 <= number <= 12 else NO_MONTH
    for number, name in enumerate(_MONTH_NAMES, start=1):
        if text == name or text == name[:3]:
            return number
    return NO_MONTH


def price_text(price: float | None) -> str:
    """
    Text form of a price used by search: `50` not `50.0`, `329.85` as-is.
    """
    if price is None:
        return ""
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))


@dataclass(frozen=True)
class TransactionFilter:
    month: int | None = None
    search: str = ""

    @classmethod
    def build(cls, *, month: int | str | None = None, search: str | None = "") -> TransactionFilter:
        return cls(month=parse_month(month), search=search or "")

    def month_only(self) -> TransactionFilter:
        return replace(self, search="")

    def matches_month(self, record: Transaction) -> bool:
        if self.month is None:
            return True
        return record.sale_month == self.month

    def matches_search(self, record: Transaction) -> bool:
        if not self.search:
            return True
        needle = self.search.lower()
        haystacks = (record.title or "", record.description or "", price_text(record.price))
        return any(needle in text.lower() for text in haystacks)

    def matches(self, record: Transaction) -> bool:
        return self.matches_month(record) and self.matches_search(record)
