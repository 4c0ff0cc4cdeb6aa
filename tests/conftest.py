"""Shared fixtures: in-memory store and an API client wired to it."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from tests.fakes import make_record
from transactions.repository import InMemoryTransactionStore, get_store
from transactions.schemas import Transaction


@pytest.fixture
def two_may_records() -> list[Transaction]:
    return [
        make_record(id=1, price=50, sold=True, category="A", dateOfSale="2024-05-01T00:00:00Z"),
        make_record(id=2, price=150, sold=False, category="B", dateOfSale="2023-05-10T00:00:00Z"),
    ]


@pytest.fixture
def store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()


@pytest.fixture
def client(store: InMemoryTransactionStore):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
