"""
Tests for cross-cutting API behavior.

Covers the centralized catch-all fault handler, security headers,
rate limiting and the health endpoint.
"""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from sampleweb.core.config import Settings
from sampleweb.interfaces.weather.dependencies import get_forecast_use_case
from sampleweb.main import create_app
from sampleweb.shared.security.headers import SECURE_HEADERS


def _app(**overrides):
    return create_app(Settings(rate_limit_enabled=False, **overrides))


class TestUnexpectedFaults:
    """Any exception escaping a route becomes the generic 400 problem."""

    def test_unexpected_exception_returns_400(self) -> None:
        app = _app()
        use_case = MagicMock()
        use_case.execute.side_effect = RuntimeError("connection reset by peer")
        app.dependency_overrides[get_forecast_use_case] = lambda: use_case

        # The server error middleware re-raises after responding.
        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/forecast/new", json={"PostalCode": "55555"})

        assert response.status_code == 400
        assert response.json()["title"] == "One or more validation errors occurred."
        assert "connection reset" not in response.text

    def test_unexpected_exception_response_has_security_headers(self) -> None:
        app = _app()
        use_case = MagicMock()
        use_case.execute.side_effect = RuntimeError("connection reset by peer")
        app.dependency_overrides[get_forecast_use_case] = lambda: use_case

        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/forecast/new", json={"PostalCode": "55555"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        missing = [h for h, v in SECURE_HEADERS.items() if response.headers.get(h) != v]
        assert missing == []

    def test_domain_fault_is_logged_with_traceback(self) -> None:
        client = TestClient(_app())
        with patch("sampleweb.shared.errors.handlers.logger") as logger:
            response = client.get("/weatherforecast/throws")

        assert response.status_code == 400
        logger.exception.assert_called_once()
        logger.error.assert_not_called()


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        client = TestClient(_app())
        for response in (
            client.get("/api/v1/health"),
            client.post("/weatherforecast/create", json={"PostalCode": ""}),
        ):
            for header_name, header_value in SECURE_HEADERS.items():
                assert response.headers[header_name] == header_value


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self) -> None:
        app = create_app(Settings(rate_limit_default="2/minute"))
        client = TestClient(app)

        statuses = [client.get("/api/v1/health").status_code for _ in range(3)]

        assert statuses == [200, 200, 429]

    def test_rate_limit_body_is_a_problem(self) -> None:
        client = TestClient(create_app(Settings(rate_limit_default="1/minute")))
        client.get("/api/v1/health")
        response = client.get("/api/v1/health")
        assert response.status_code == 429
        assert response.json() == {
            "type": "https://tools.ietf.org/html/rfc6585#section-4",
            "title": "Too many requests.",
            "status": 429,
        }

    def test_disabled_limiter_never_blocks(self) -> None:
        client = TestClient(_app(rate_limit_default="1/minute"))
        statuses = {client.get("/api/v1/health").status_code for _ in range(3)}
        assert statuses == {200}


class TestHealth:
    """Tests for GET /api/v1/health."""

    def test_health_reports_version(self) -> None:
        client = TestClient(_app(version="9.9.9"))
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "9.9.9"}

    def test_docs_hidden_unless_debug(self) -> None:
        assert TestClient(_app()).get("/docs").status_code == 404
        assert TestClient(_app(debug=True)).get("/docs").status_code == 200
