"""
Pytest fixtures for API integration tests.

Provides the FastAPI test client.
"""
import pytest
from fastapi.testclient import TestClient

from sheet_cleanup.main import app


@pytest.fixture(scope="function")
def client():
    """Test client for the application."""
    with TestClient(app) as test_client:
        yield test_client
