"""
Tests for the top-level error policy and static asset forwarding.
"""
import httpx
import pytest
from sqlalchemy.exc import OperationalError

import assets.router


class TestErrorHandling:
    def test_unknown_api_path(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_unknown_api_method(self, client):
        response = client.patch("/api/addresses", json={})
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_post_to_diagnostics(self, client):
        response = client.post("/api/check-tables")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_database_failure_becomes_500(self, client, db_session, mocker):
        mocker.patch.object(
            db_session, "query",
            side_effect=OperationalError("SELECT 1", {}, Exception("server closed the connection")),
        )

        response = client.get("/api/restaurants")

        assert response.status_code == 500
        assert "server closed the connection" in response.json()["error"]

    def test_database_failure_keeps_cors_headers(self, client, db_session, mocker):
        mocker.patch.object(
            db_session, "query",
            side_effect=OperationalError("SELECT 1", {}, Exception("server closed the connection")),
        )

        response = client.get("/api/organizations", headers={"Origin": "http://localhost:5173"})

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_empty_message_becomes_unknown_error(self, client, db_session, mocker):
        mocker.patch.object(db_session, "query", side_effect=RuntimeError())

        response = client.get("/api/organizations")

        assert response.status_code == 500
        assert response.json() == {"error": "Unknown error"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/organizations",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400
        assert "error" in response.json()


class TestAssetForwarding:
    def test_no_asset_server_configured(self, client, monkeypatch):
        monkeypatch.setattr(assets.router, "ASSETS_URL", None)

        response = client.get("/index.html")
        assert response.status_code == 404

    def test_forwards_non_api_paths(self, client, monkeypatch):
        seen = []

        def upstream(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(
                200,
                content=b"<html>directory</html>",
                headers={"content-type": "text/html; charset=utf-8"},
            )

        monkeypatch.setattr(assets.router, "ASSETS_URL", "http://assets.internal/")
        monkeypatch.setattr(
            assets.router,
            "get_asset_client",
            lambda: httpx.AsyncClient(transport=httpx.MockTransport(upstream)),
        )

        response = client.get("/restaurants/12?view=map")

        assert response.status_code == 200
        assert response.text == "<html>directory</html>"
        assert response.headers["content-type"].startswith("text/html")
        assert str(seen[0]) == "http://assets.internal/restaurants/12?view=map"

    @pytest.mark.parametrize("status_code", [404, 503])
    def test_relays_upstream_status(self, client, monkeypatch, status_code):
        monkeypatch.setattr(assets.router, "ASSETS_URL", "http://assets.internal")
        monkeypatch.setattr(
            assets.router,
            "get_asset_client",
            lambda: httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(status_code))),
        )

        assert client.get("/missing.js").status_code == status_code

    def test_api_paths_never_forwarded(self, client, monkeypatch):
        monkeypatch.setattr(assets.router, "ASSETS_URL", "http://assets.internal")
        monkeypatch.setattr(assets.router, "get_asset_client", lambda: pytest.fail("forwarded an API path"))

        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
