"""Tests for environment-driven settings."""

import pytest

from core import config


def test_seed_url_default(monkeypatch) -> None:
    monkeypatch.delenv("SEED_URL", raising=False)

    assert config.seed_url() == config.DEFAULT_SEED_URL


def test_seed_timeout_falls_back_on_garbage(monkeypatch) -> None:
    monkeypatch.setenv("SEED_TIMEOUT_S", "soon")

    assert config.seed_timeout_s() == 30.0


def test_store_backend_rejects_unknown(monkeypatch) -> None:
    monkeypatch.setenv("STORE_BACKEND", "mongo")

    with pytest.raises(RuntimeError):
        config.store_backend()


def test_cors_origins_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://dash.example.test, http://localhost:3000")

    assert config.cors_allow_origins() == ["https://dash.example.test", "http://localhost:3000"]


def test_cors_origins_default(monkeypatch) -> None:
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    assert config.cors_allow_origins() == ["http://localhost:5173", "http://127.0.0.1:5173"]
