"""
Seed feed HTTP client.

The seed source is a static JSON document: an array of transaction-shaped
objects, e.g.

    [{"id": 1, "title": "...", "price": 329.85, "description": "...",
      "category": "men's clothing", "image": "...", "sold": false,
      "dateOfSale": "2021-11-27T20:29:54+05:30"}, ...]
"""

from __future__ import annotations

from typing import Any

import httpx

from .errors import UpstreamFetchError


async def fetch_seed_items(
    *,
    url: str,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[dict[str, Any]]:
    """
    Download the seed document and return its items as plain dicts.

    `transport` lets callers (tests) swap the network for an
    `httpx.MockTransport`.
    """
    url = (url or "").strip()
    if not url:
        raise UpstreamFetchError("SEED_URL is empty.")

    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            resp = await client.get(url)
    except httpx.HTTPError as e:
        raise UpstreamFetchError(f"Seed request failed: {e}") from e

    if resp.status_code != 200:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:300]
        raise UpstreamFetchError(f"Seed request failed: {resp.status_code} {body}")

    try:
        data = resp.json()
    except ValueError as e:
        raise UpstreamFetchError("Seed source returned invalid JSON.") from e

    if not isinstance(data, list):
        raise UpstreamFetchError("Seed source must return a JSON array.")
    if not all(isinstance(item, dict) for item in data):
        raise UpstreamFetchError("Seed source items must be JSON objects.")
    return data
