import pytest
from fastapi.testclient import TestClient

from config import Settings
from database import UserStore
from service import ComplaintService


@pytest.fixture
def store():
    """A store seeded with secret1 (user) and secret2 (admin)."""
    s = UserStore()
    s.seed()
    return s


@pytest.fixture
def service(store):
    return ComplaintService(store)


@pytest.fixture
def client(store):
    from main import create_app
    app = create_app(Settings(), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_complaint():
    return {"id": "c1", "title": "Leak", "summary": "Water under the sink", "severity": 3}
