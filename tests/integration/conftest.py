"""Fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from hexaparking.application import create_app


@pytest.fixture
def client():
    """Test client running the app lifespan over fresh in-memory stores."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def create_lot(client):
    """Create a parking lot through the API."""

    def _create(name="Main", total_spaces=1):
        response = client.post(
            "/api/parking-lots", json={"name": name, "totalSpaces": total_spaces}
        )
        assert response.status_code == 201
        return response.json()

    return _create
