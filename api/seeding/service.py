"""
Seeding: replace the whole record store from the remote seed feed.

The feed is downloaded and parsed completely before the store is touched, so
a failed fetch leaves the previous dataset in place.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from core import config, feed
from core.errors import UpstreamFetchError
from transactions.repository import TransactionStore
from transactions.schemas import Transaction

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[Transaction])


def parse_items(items: list[dict[str, Any]]) -> list[Transaction]:
    try:
        return _records_adapter.validate_python(items)
    except ValidationError as e:
        raise UpstreamFetchError(f"Seed source returned malformed records ({e.error_count()} errors).") from e


async def initialize(
    store: TransactionStore,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """
    Fetch the seed document and swap it into the store. Returns the record count.
    """
    url = config.seed_url()
    logger.info("seed_started url=%s", url)
    try:
        items = await feed.fetch_seed_items(url=url, timeout_s=config.seed_timeout_s(), transport=transport)
        records = parse_items(items)
    except UpstreamFetchError as e:
        logger.warning("seed_failed url=%s error=%s", url, e.message)
        raise

    count = await store.replace_all(records)
    logger.info("seed_complete count=%s", count)
    return count
