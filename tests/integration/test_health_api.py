"""Tests for health check endpoint."""

from fastapi import status

from hexaparking import __version__
from hexaparking.middleware import TRACE_ID_HEADER


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert data["storage"] == "memory"


def test_trace_id_header_round_trip(client):
    """Test responses echo the incoming trace id."""
    response = client.get("/health", headers={TRACE_ID_HEADER: "trace-abc"})

    assert response.headers[TRACE_ID_HEADER] == "trace-abc"
