import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.core.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from app.services.task_store import TaskStore  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    # fresh in-memory database per test
    return Settings(
        _env_file=None,
        APP_ENV="test",
        DATABASE_URL="sqlite://",
        CORS_ALLOW_ORIGINS="http://localhost:5173",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def db_session(app):
    with Session(app.state.engine) as s:
        yield s


@pytest.fixture
def store(db_session) -> TaskStore:
    return TaskStore(db_session)
