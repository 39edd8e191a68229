import importlib
import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import get_settings

TEST_ENV = {
    "R2_ACCESS_KEY_ID": "test-access-key",
    "R2_SECRET_ACCESS_KEY": "test-secret-key",
    "R2_ACCOUNT_ID": "testaccount",
    "R2_BUCKET_NAME": "test-bucket",
    "LOG_LEVEL": "DEBUG",
}


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    for key, value in TEST_ENV.items():
        os.environ[key] = value
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def app_instance(configure_environment):
    from app import main as app_module

    importlib.reload(app_module)
    return app_module.app


@pytest.fixture
def settings(configure_environment):
    return get_settings()


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app_instance.dependency_overrides.clear()
