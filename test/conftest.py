"""
Fixtures: a fresh OrderStore per test and an httpx client talking to an app built around it.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from order_service.main import create_app
from order_service.store import OrderStore


@pytest.fixture
def store() -> OrderStore:
    return OrderStore()


@pytest.fixture
async def client(store):
    app = create_app(store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
