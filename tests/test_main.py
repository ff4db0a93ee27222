import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from catalog_admin import upstream


async def test_read_root(app, async_client) -> None:
    response = await async_client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_categories_require_bearer_token(app, async_client, catalog) -> None:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as anonymous_client:
        response = await anonymous_client.get("/categories")

    assert response.status_code in (401, 403)
    assert catalog.requests == []


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/categories"),
        ("GET", "/categories/tree"),
        ("GET", "/categories/available-parents"),
        ("POST", "/categories"),
        ("GET", "/categories/cat-1"),
        ("GET", "/categories/cat-1/ancestors"),
        ("GET", "/categories/cat-1/header-category"),
        ("PATCH", "/categories/cat-1"),
        ("PATCH", "/categories/cat-1/status"),
        ("PUT", "/categories/cat-1/children/order"),
        ("DELETE", "/categories/cat-1"),
        ("POST", "/categories/bulk-delete"),
    ],
)
async def test_every_category_route_requires_bearer_token(
    app, catalog, method, path
) -> None:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as anonymous_client:
        response = await anonymous_client.request(method, path, json={})

    assert response.status_code in (401, 403)
    assert catalog.requests == []


def test_init_from_env_requires_catalog_url(monkeypatch) -> None:
    monkeypatch.delenv("CATALOG_API_URL", raising=False)

    with pytest.raises(RuntimeError):
        upstream.init_from_env()


async def test_init_from_env_reads_base_url_and_timeout(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_API_URL", "http://catalog.example/api/")
    monkeypatch.setenv("CATALOG_API_TIMEOUT", "2.5")

    upstream.init_from_env()
    try:
        client = upstream.get_client()
        assert str(client.base_url) == "http://catalog.example/api/"
        assert client.timeout.read == 2.5
    finally:
        await upstream.close_client()

    assert not upstream.is_initialized()


async def test_get_client_initializes_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_API_URL", "http://catalog.example")
    await upstream.close_client()

    try:
        client = upstream.get_client()
        assert isinstance(client, httpx.AsyncClient)
        assert upstream.get_client() is client
    finally:
        await upstream.close_client()
