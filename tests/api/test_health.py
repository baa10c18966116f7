"""
Test suite for the assembled application.

Covers health routes and observability middleware. The lifespan is not
entered, so no provider clients are opened.

System role: Verification of API assembly
"""

import pytest
from fastapi.testclient import TestClient

from pdfchat.api.deps import get_settings_dependency
from pdfchat.api.main import create_app
from pdfchat.configs import Settings
from pdfchat.configs.celery_config import CelerySettings
from pdfchat.configs.embedding import EmbeddingSettings
from pdfchat.configs.vector_store import VectorStoreSettings
from pdfchat.observability.middleware import CORRELATION_HEADER


@pytest.fixture
def client() -> TestClient:
    """Provide TestClient for the full app."""
    return TestClient(create_app())


class TestHealth:
    """Test suite for liveness routes."""

    def test_root_should_report_all_good(self, client: TestClient) -> None:
        """Test GET / liveness message."""
        # Act
        response = client.get("/")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"message": "all good"}

    def test_health_check(self, client: TestClient) -> None:
        """Test GET /api/v1/health."""
        # Act
        response = client.get("/api/v1/health")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "message": "Server Healthy"}


class TestCorrelationMiddleware:
    """Test suite for correlation id propagation."""

    def test_incoming_correlation_id_should_be_echoed(self, client: TestClient) -> None:
        """Test a caller-supplied id is returned unchanged."""
        # Act
        response = client.get("/api/v1/health", headers={CORRELATION_HEADER: "req-123"})

        # Assert
        assert response.headers[CORRELATION_HEADER] == "req-123"

    def test_missing_correlation_id_should_be_generated(self, client: TestClient) -> None:
        """Test a new id is assigned when none is sent."""
        # Act
        first = client.get("/api/v1/health")
        second = client.get("/api/v1/health")

        # Assert
        assert first.headers[CORRELATION_HEADER]
        assert first.headers[CORRELATION_HEADER] != second.headers[CORRELATION_HEADER]


class TestReadiness:
    """Test suite for the readiness route."""

    def test_ready_should_report_configured_wiring(self) -> None:
        """Test collection, queue and dimension come from settings."""
        # Arrange
        app = create_app()
        settings = Settings(
            vector_store=VectorStoreSettings(collection_name="docs", embedding_dimension=64),
            embedding=EmbeddingSettings(provider="fake", dimension=64),
            celery=CelerySettings(queue_name="ingest"),
        )
        app.dependency_overrides[get_settings_dependency] = lambda: settings
        client = TestClient(app)

        # Act
        response = client.get("/api/v1/health/ready")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "status": "ready",
            "collection": "docs",
            "queue": "ingest",
            "embedding_dimension": 64,
        }
