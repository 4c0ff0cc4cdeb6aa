"""
FastAPI router for the seeding endpoint.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends

from transactions import schemas
from transactions.repository import TransactionStore, get_store

from . import service

router = APIRouter()


def get_feed_transport() -> httpx.AsyncBaseTransport | None:
    """
    Transport for the seed download; None means the real network.
    """
    return None


@router.get("/initialize", response_model=schemas.InitializeResponse)
async def initialize(
    store: TransactionStore = Depends(get_store),
    transport: httpx.AsyncBaseTransport | None = Depends(get_feed_transport),
) -> dict:
    """
    Replace every stored record with the current contents of the seed feed.
    """
    count = await service.initialize(store, transport=transport)
    return {"message": "Database initialized successfully", "count": count}
