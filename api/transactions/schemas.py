"""
Pydantic schemas for transaction records and the dashboard views.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Transaction(BaseModel):
    """
    One product transaction as delivered by the seed feed.

    Field names follow the feed (camelCase `dateOfSale`). Missing fields are
    stored as None; unknown feed keys (e.g. `image`) are dropped.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | None = None
    title: str | None = None
    description: str | None = None
    price: float | None = None
    dateOfSale: datetime | None = None
    category: str | None = None
    sold: bool | None = None

    @property
    def sale_month(self) -> int | None:
        # Month as written in the timestamp; never shifted to UTC.
        if self.dateOfSale is None:
            return None
        return self.dateOfSale.month


class TransactionsPage(BaseModel):
    transactions: list[Transaction]
    totalPages: int


class StatisticsResponse(BaseModel):
    totalSaleAmount: float
    totalSoldItems: int
    totalNotSoldItems: int


class CombinedResponse(BaseModel):
    transactions: TransactionsPage
    statistics: StatisticsResponse
    barChart: dict[str, int]
    pieChart: dict[str, int]


class InitializeResponse(BaseModel):
    message: str
    count: int
