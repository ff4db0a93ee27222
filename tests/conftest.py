import httpx
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from catalog_admin import upstream
from catalog_admin.main import app as fastapi_app
from tests.fake_catalog import FakeCatalog

TEST_AUTH_TOKEN = "test-admin-token"
CATALOG_URL = "http://catalog.test"


@pytest.fixture(autouse=True, scope="session")
def anyio_backend():
    return ("asyncio", {"use_uvloop": True})


@pytest.fixture
def catalog():
    fake = FakeCatalog(token=TEST_AUTH_TOKEN)
    fake.header_names = {"hdr-grocery": "Grocery", "hdr-pharmacy": "Pharmacy"}
    return fake


@pytest.fixture
def app(catalog):
    upstream.init_client(CATALOG_URL, transport=httpx.MockTransport(catalog.handle))
    return fastapi_app


@pytest.fixture
async def async_client(app):
    async with LifespanManager(app):
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
            headers={"Authorization": f"Bearer {TEST_AUTH_TOKEN}"},
        ) as client:
            yield client
