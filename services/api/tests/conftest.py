import os
import pytest
from fastapi.testclient import TestClient

# Settings are read at import; keep the per-IP limiter out of the way of the suite.
os.environ["RATE_LIMIT_ENABLED"] = "false"

from app.main import app


@pytest.fixture
def client():
    """Test client for the API."""
    with TestClient(app) as c:
        yield c
