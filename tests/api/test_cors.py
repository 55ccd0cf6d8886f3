"""
Tests for the CORS allow-list gate, both as a unit and through the app.
"""

import pytest
from fastapi.testclient import TestClient

from movies_api.api.cors import CorsGate
from movies_api.api.main import create_app
from movies_api.store.movie_store import MovieStore

ALLOWED = ["http://localhost:8080", "http://movies.com"]


class TestCorsGate:
    """Unit tests for CorsGate decisions and headers."""

    def test_missing_origin_allowed(self):
        gate = CorsGate(ALLOWED)
        assert gate.is_allowed(None)
        assert gate.is_allowed("")

    def test_listed_origin_allowed(self):
        assert CorsGate(ALLOWED).is_allowed("http://movies.com")

    def test_unlisted_origin_rejected(self):
        assert not CorsGate(ALLOWED).is_allowed("http://evil.com")

    def test_origin_match_is_exact(self):
        assert not CorsGate(ALLOWED).is_allowed("http://movies.com.evil.com")

    def test_headers_echo_origin(self):
        headers = CorsGate(ALLOWED).response_headers("http://movies.com")
        assert headers["Access-Control-Allow-Origin"] == "http://movies.com"
        assert "Access-Control-Allow-Methods" not in headers

    def test_preflight_headers(self):
        headers = CorsGate(ALLOWED).response_headers("http://movies.com", preflight=True)
        assert headers["Access-Control-Allow-Methods"] == "GET,POST,PATCH,DELETE"

    def test_rejected_origin_gets_nothing(self):
        assert CorsGate(ALLOWED).response_headers("http://evil.com", preflight=True) == {}

    def test_missing_origin_has_no_allow_origin(self):
        headers = CorsGate(ALLOWED).response_headers(None, preflight=True)
        assert "Access-Control-Allow-Origin" not in headers
        assert headers["Access-Control-Allow-Methods"] == "GET,POST,PATCH,DELETE"


@pytest.fixture
def client():
    return TestClient(create_app(store=MovieStore(), allowed_origins=ALLOWED))


class TestCorsMiddleware:
    """CORS headers on real responses."""

    def test_allowed_origin_on_list(self, client):
        r = client.get("/movies", headers={"Origin": "http://localhost:8080"})
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == "http://localhost:8080"

    def test_rejected_origin_still_served(self, client):
        r = client.get("/movies", headers={"Origin": "http://evil.com"})
        assert r.status_code == 200
        assert "access-control-allow-origin" not in r.headers

    def test_no_origin_no_header(self, client):
        r = client.get("/movies")
        assert "access-control-allow-origin" not in r.headers

    def test_error_responses_carry_header(self, client):
        r = client.get("/movies/nope", headers={"Origin": "http://movies.com"})
        assert r.status_code == 404
        assert r.headers["access-control-allow-origin"] == "http://movies.com"

    def test_preflight_movie(self, client):
        r = client.options("/movies/some-id", headers={"Origin": "http://movies.com"})
        assert r.status_code == 204
        assert r.headers["access-control-allow-origin"] == "http://movies.com"
        assert r.headers["access-control-allow-methods"] == "GET,POST,PATCH,DELETE"

    def test_preflight_collection(self, client):
        r = client.options("/movies", headers={"Origin": "http://localhost:8080"})
        assert r.status_code == 204
        assert r.headers["access-control-allow-methods"] == "GET,POST,PATCH,DELETE"

    def test_preflight_rejected_origin(self, client):
        r = client.options("/movies/some-id", headers={"Origin": "http://evil.com"})
        assert r.status_code == 204
        assert "access-control-allow-origin" not in r.headers
        assert "access-control-allow-methods" not in r.headers
