"""Tests for app wiring in reviewgate.main: CORS allow-list variants and the uvicorn entry point."""

import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from reviewgate.core.config import Settings
from reviewgate.main import create_app, run

SECRET = "cors-test-secret-7d2e4f6a8b0c1d3e5f7a9b"
FRONT_END = "https://reviews.example"


def _client(allowed_origins: str) -> TestClient:
    app_settings = Settings(_env_file=None, JWT_SECRET=SECRET, ALLOWED_ORIGINS=allowed_origins)
    return TestClient(create_app(app_settings))


def _preflight(client: TestClient, origin: str):
    return client.options(
        "/api/auth/login",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )


class TestCors(unittest.TestCase):
    def test_explicit_origin_allows_credentials(self) -> None:
        response = _preflight(_client(FRONT_END), FRONT_END)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], FRONT_END)
        self.assertEqual(response.headers["access-control-allow-credentials"], "true")

    def test_explicit_origin_rejects_others(self) -> None:
        client = _client(FRONT_END)
        self.assertEqual(_preflight(client, "https://evil.example").status_code, 400)
        response = client.get("/", headers={"Origin": "https://evil.example"})
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("access-control-allow-origin", response.headers)

    def test_wildcard_never_allows_credentials(self) -> None:
        response = _preflight(_client("*"), FRONT_END)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], "*")
        self.assertNotIn("access-control-allow-credentials", response.headers)

    def test_empty_list_sends_no_cors_headers(self) -> None:
        response = _client("").get("/", headers={"Origin": FRONT_END})
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("access-control-allow-origin", response.headers)
        self.assertNotIn("access-control-allow-credentials", response.headers)


class TestRun(unittest.TestCase):
    @patch("reviewgate.main.uvicorn.run")
    def test_serves_app_on_configured_address(self, mock_run) -> None:
        with patch.dict(os.environ, {"API_HOST": "127.0.0.1", "API_PORT": "9100"}):
            run()
        mock_run.assert_called_once_with(
            "reviewgate.main:app", host="127.0.0.1", port=9100, reload=False
        )

    @patch("reviewgate.main.uvicorn.run")
    def test_defaults(self, mock_run) -> None:
        env = {k: v for k, v in os.environ.items() if k not in ("API_HOST", "API_PORT")}
        with patch.dict(os.environ, env, clear=True):
            run()
        mock_run.assert_called_once_with(
            "reviewgate.main:app", host="0.0.0.0", port=8000, reload=False
        )


if __name__ == "__main__":
    unittest.main()
