import pytest
from fastapi.testclient import TestClient

from finance_dashboard.db.session_store import store
from finance_dashboard.main import app


@pytest.fixture(autouse=True)
def reset_session():
    store.reset()
    yield
    store.reset()


@pytest.fixture
def client():
    return TestClient(app)
