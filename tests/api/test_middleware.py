"""Tests for API middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.testing import CapturingLogger

import app.api.middleware as middleware
import app.main as main
from app.api.middleware import setup_middleware
from app.main import app, register_exception_handlers


@pytest.fixture
def sync_client() -> TestClient:
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def catalog_app() -> FastAPI:
    """Minimal app wired like the real one; the term "boom" raises."""
    routed = FastAPI()
    setup_middleware(routed)
    register_exception_handlers(routed)

    @routed.get("/products/{term}")
    async def find_one(term: str) -> dict:
        if term == "boom":
            raise RuntimeError("kaboom")
        return {"term": term}

    return routed


@pytest.fixture
def captured(monkeypatch) -> CapturingLogger:
    """Record what the middleware and the error handlers log."""
    capturing = CapturingLogger()
    monkeypatch.setattr(middleware, "logger", capturing)
    monkeypatch.setattr(main, "logger", capturing)
    return capturing


def logged(capturing: CapturingLogger, event: str) -> list[dict]:
    """Keyword arguments of every call that logged the given event."""
    return [call.kwargs for call in capturing.calls if call.args == (event,)]


class TestRequestContextMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, sync_client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = sync_client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        # UUID format
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36

    def test_uses_provided_request_id(self, sync_client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = sync_client.get(
            "/health",
            headers={"X-Request-ID": custom_id},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id

    def test_completion_log_names_route_and_term(
        self, catalog_app: FastAPI, captured: CapturingLogger
    ) -> None:
        """Lookups log the route template and the term they were given."""
        response = TestClient(catalog_app).get("/products/mens-tee")

        assert response.status_code == 200
        (entry,) = logged(captured, "Request completed")
        assert entry["route"] == "/products/{term}"
        assert entry["term"] == "mens-tee"
        assert entry["status_code"] == 200

    def test_unmatched_path_logged_as_route(
        self, catalog_app: FastAPI, captured: CapturingLogger
    ) -> None:
        TestClient(catalog_app).get("/nowhere")

        (entry,) = logged(captured, "Request completed")
        assert entry["route"] == "/nowhere"
        assert entry["status_code"] == 404


class TestUnhandledErrors:
    """Tests for the catch-all exception handler."""

    def test_unhandled_exception_becomes_500(self, catalog_app: FastAPI) -> None:
        """Unhandled errors return the standard envelope without leaking detail."""
        client = TestClient(catalog_app, raise_server_exceptions=False)

        response = client.get("/products/boom", headers={"X-Request-ID": "req-boom"})

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert data["message"] == "An internal error occurred"
        assert "kaboom" not in response.text
        assert data["request_id"] == "req-boom"

    def test_unhandled_exception_is_logged_with_route(
        self, catalog_app: FastAPI, captured: CapturingLogger
    ) -> None:
        client = TestClient(catalog_app, raise_server_exceptions=False)

        client.get("/products/boom", headers={"X-Request-ID": "req-boom"})

        (completed,) = logged(captured, "Request completed")
        assert completed["status_code"] == 500
        assert completed["term"] == "boom"

        (failure,) = logged(captured, "Unhandled exception in handler")
        assert failure["route"] == "/products/{term}"
        assert failure["request_id"] == "req-boom"
        assert failure["error"] == "kaboom"
