import pytest

from shared.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def lenient(monkeypatch):
    monkeypatch.setenv("STRICT_DECODE", "false")
    get_settings.cache_clear()


@pytest.fixture
def create_user_payload() -> dict:
    return {
        "id": "u1",
        "name": "Ada",
        "email": "ada@x.com",
        "created_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def get_user_payload() -> dict:
    return {
        "id": "u2",
        "name": "Bob",
        "email": "bob@x.com",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-02-01T12:30:00+02:00",
    }
