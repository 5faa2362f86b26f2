import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add the repo root to sys.path so "import app" works in tests
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

from app.dependencies import get_store  # noqa: E402
from app.main import app  # noqa: E402
from app.seed import seed  # noqa: E402
from app.store import TicketStore  # noqa: E402


@pytest.fixture
def store():
    return seed(TicketStore())


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
