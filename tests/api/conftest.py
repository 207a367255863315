# tests/api/conftest.py
import pytest
import sys
import os
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).parents[2]
sys.path.insert(0, str(project_root))

# Set test environment variables
os.environ["DEBUG"] = "true"
os.environ["API_KEY"] = "dev_key"

from fastapi.testclient import TestClient

from api.main import app
from api.utils.sessions import store

TEST_API_KEY = "dev_key"

@pytest.fixture
def client():
    """Test client for the application."""
    return TestClient(app)

@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": TEST_API_KEY}

@pytest.fixture(autouse=True)
def clear_sessions():
    """Start every test with an empty session store."""
    store.clear()
    yield
    store.clear()

@pytest.fixture
def session_id(client, api_headers):
    """Create a session and return its id."""
    response = client.post("/sessions", headers=api_headers)
    assert response.status_code == 201
    return response.json()["session_id"]
