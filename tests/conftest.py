"""Pytest hooks and fixtures."""

import os

import httpx
import pytest

from akamai_appsec.session.session import Session

BASE_URL = "https://akaa-test.luna.akamaiapis.net"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep host AKAMAI_APPSEC_* variables and ~/.akamai-appsec out of the tests."""
    for key in list(os.environ):
        if key.startswith("AKAMAI_APPSEC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def make_session():
    """Factory: ``make_session(handler, **session_kwargs) -> (session, requests)``.

    ``handler`` receives each httpx.Request and returns an httpx.Response; every request
    the session sends is appended to ``requests``.
    """
    clients: list[httpx.Client] = []

    def _make(handler, **kwargs):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_record))
        clients.append(client)
        return Session(BASE_URL, client=client, **kwargs), requests

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def internal_error_body():
    return {
        "type": "internal_error",
        "title": "Internal Server Error",
        "detail": "Error fetching data",
        "status": 500,
    }
