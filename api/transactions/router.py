"""
Dashboard read endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from . import schemas, service
from .repository import TransactionStore, get_store

router = APIRouter()


@router.get("/transactions", response_model=schemas.TransactionsPage)
async def list_transactions(
    month: str | None = Query(default=None, max_length=20),
    search: str = Query(default="", max_length=500),
    page: int = Query(default=service.DEFAULT_PAGE, ge=1, le=service.MAX_PAGE),
    per_page: int = Query(default=service.DEFAULT_PER_PAGE, alias="perPage", ge=1, le=service.MAX_PER_PAGE),
    store: TransactionStore = Depends(get_store),
) -> dict:
    """
    One page of records for a month, optionally narrowed by free text.
    """
    return await service.list_transactions(store, month=month, search=search, page=page, per_page=per_page)


@router.get("/statistics", response_model=schemas.StatisticsResponse)
async def get_statistics(
    month: str | None = Query(default=None, max_length=20),
    store: TransactionStore = Depends(get_store),
) -> dict:
    return await service.statistics(store, month=month)


@router.get("/barchart")
async def get_bar_chart(
    month: str | None = Query(default=None, max_length=20),
    store: TransactionStore = Depends(get_store),
) -> dict[str, int]:
    return await service.bar_chart(store, month=month)


@router.get("/piechart")
async def get_pie_chart(
    month: str | None = Query(default=None, max_length=20),
    store: TransactionStore = Depends(get_store),
) -> dict[str, int]:
    return await service.pie_chart(store, month=month)


@router.get("/combined", response_model=schemas.CombinedResponse)
async def get_combined(
    month: str | None = Query(default=None, max_length=20),
    search: str = Query(default="", max_length=500),
    page: int = Query(default=service.DEFAULT_PAGE, ge=1, le=service.MAX_PAGE),
    per_page: int = Query(default=service.DEFAULT_PER_PAGE, alias="perPage", ge=1, le=service.MAX_PER_PAGE),
    store: TransactionStore = Depends(get_store),
) -> dict:
    """
    Listing, statistics, bar chart and pie chart in one response.
    """
    return await service.combined(store, month=month, search=search, page=page, per_page=per_page)
