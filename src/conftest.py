import contextlib
from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict[Callable, Callable] | None = None) -> AsyncIterator[AsyncClient]:
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    """Create a test client."""
    async with client_factory() as ac:
        yield ac
