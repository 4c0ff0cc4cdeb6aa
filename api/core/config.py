"""
Environment-driven settings.

Every value is read on call, so tests can monkeypatch the environment
without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_SEED_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")
STORE_BACKENDS = {"memory", "postgres"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def seed_url() -> str:
    return os.environ.get("SEED_URL", DEFAULT_SEED_URL).strip() or DEFAULT_SEED_URL


def seed_timeout_s() -> float:
    return _env_float("SEED_TIMEOUT_S", 30.0)


def store_backend() -> str:
    backend = os.environ.get("STORE_BACKEND", "memory").strip().lower() or "memory"
    if backend not in STORE_BACKENDS:
        raise RuntimeError(f"Unsupported STORE_BACKEND '{backend}'. Allowed: {sorted(STORE_BACKENDS)}")
    return backend


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
