from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from applyte_api.app import create_app
from applyte_api.auth import issue_token
from applyte_api.settings import Settings
from applyte_api.storage import TABLES, MemoryDocumentStore

SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret=SECRET, link_base_url="http://applyte.io/api", log_level="WARNING")


@pytest.fixture
def store() -> MemoryDocumentStore:
    return MemoryDocumentStore(*TABLES)


@pytest.fixture
def client(settings: Settings, store: MemoryDocumentStore) -> TestClient:
    return TestClient(create_app(settings, store))


def _bearer(subject: str, access_rights: str = "user", verified: bool = True) -> dict[str, str]:
    token = issue_token(subject, SECRET, access_rights=access_rights, verified=verified)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def bearer() -> Callable[..., dict[str, str]]:
    return _bearer


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return _bearer("admin-1", access_rights="admin")
