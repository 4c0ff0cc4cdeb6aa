"""Deterministic record builders and a fake seed feed."""

from __future__ import annotations

import json
from typing import Any

import httpx

from transactions.schemas import Transaction


def make_record(**overrides: Any) -> Transaction:
    data: dict[str, Any] = {
        "id": 1,
        "title": "Fjallraven Backpack",
        "description": "Fits 15 inch laptops",
        "price": 109.95,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
        "category": "men's clothing",
        "sold": False,
    }
    data.update(overrides)
    return Transaction.model_validate(data)


SEED_ITEMS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 329.85,
        "description": "Your perfect pack for everyday use",
        "category": "men's clothing",
        "image": "https://example.test/1.jpg",
        "sold": False,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
    },
    {
        "id": 2,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 44.6,
        "description": "Slim-fitting style",
        "category": "men's clothing",
        "image": "https://example.test/2.jpg",
        "sold": True,
        "dateOfSale": "2021-10-27T20:29:54+05:30",
    },
    {
        "id": 3,
        "title": "WD 4TB Gaming Drive",
        "price": 114,
        "description": "Expand your PS4 gaming experience",
        "category": "electronics",
        "image": "https://example.test/3.jpg",
        "sold": True,
        "dateOfSale": "2022-11-02T20:29:54+05:30",
    },
]


def feed_transport(payload: Any = None, *, status_code: int = 200, body: str | None = None) -> httpx.MockTransport:
    """
    Mock transport answering every request with `payload` as JSON (or raw `body`).
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if body is not None:
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, content=json.dumps(payload), headers={"content-type": "application/json"})

    return httpx.MockTransport(handler)


def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)
