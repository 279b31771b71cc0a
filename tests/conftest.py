import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from product_service.config import Settings
from product_service.database import Database
from product_service.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file instead of PostgreSQL."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}",
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def client(settings):
    # Entering the client runs the lifespan: pool creation and bootstrap
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db(settings):
    database = Database.connect(settings)
    yield database
    await database.dispose()
