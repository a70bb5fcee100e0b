import httpx
import pytest

from taxilink.app import create_app


@pytest.fixture
def app(state):
    return create_app(state)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
