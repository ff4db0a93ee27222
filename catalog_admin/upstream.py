from __future__ import annotations

import os
from typing import Optional

import httpx

DEFAULT_TIMEOUT_SECONDS = 10.0

_client: Optional[httpx.AsyncClient] = None


def _normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/")


def _create_client(
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=_normalize_base_url(base_url),
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )


def init_client(
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    global _client
    _client = _create_client(base_url, timeout=timeout, transport=transport)
    return _client


def init_from_env() -> httpx.AsyncClient:
    base_url = os.environ.get("CATALOG_API_URL")
    if not base_url:
        raise RuntimeError("CATALOG_API_URL must be set to reach the catalog service.")
    timeout = float(os.environ.get("CATALOG_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
    return init_client(base_url, timeout=timeout)


def is_initialized() -> bool:
    return _client is not None


def get_client() -> httpx.AsyncClient:
    if _client is None:
        return init_from_env()
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
    _client = None
