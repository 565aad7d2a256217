import re
from pathlib import Path

import pytest
import requests

from app.utils import healthcheck

DOCKER_DIR = Path(__file__).resolve().parent.parent / "docker"


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body or {"status": "ok", "service": "products"}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._body


def test_healthy_service_exits_zero(monkeypatch):
    seen = []

    def fake_get(url, timeout):
        seen.append(url)
        return FakeResponse()

    monkeypatch.setattr(healthcheck.requests, "get", fake_get)

    assert healthcheck.main("http://products:3000/health") == 0
    assert seen == ["http://products:3000/health"]


def test_uses_configured_url(monkeypatch):
    seen = []
    monkeypatch.setenv("HEALTHCHECK_URL", "http://localhost:8001/health")
    monkeypatch.setattr(
        healthcheck.requests, "get", lambda url, timeout: seen.append(url) or FakeResponse()
    )

    assert healthcheck.main() == 0
    assert seen == ["http://localhost:8001/health"]


def test_connection_errors_are_retried_then_fail(monkeypatch):
    attempts = []

    def fake_get(url, timeout):
        attempts.append(url)
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(healthcheck.requests, "get", fake_get)

    assert healthcheck.main("http://localhost:3000/health") == 1
    assert len(attempts) == 3


def test_recovers_after_transient_error(monkeypatch):
    responses = [requests.ConnectionError("starting"), FakeResponse()]

    def fake_get(url, timeout):
        r = responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r

    monkeypatch.setattr(healthcheck.requests, "get", fake_get)

    assert healthcheck.check_service("http://localhost:3000/health") == {
        "status": "ok",
        "service": "products",
    }


def test_server_error_status_fails(monkeypatch):
    monkeypatch.setattr(
        healthcheck.requests, "get", lambda url, timeout: FakeResponse(status_code=503)
    )

    with pytest.raises(requests.HTTPError):
        healthcheck.check_service("http://localhost:3000/health")


def test_retries_fit_in_container_healthcheck_timeout():
    waits = sum(
        min(max(healthcheck.BACKOFF_MULTIPLIER * 2 ** n, healthcheck.BACKOFF_MIN), healthcheck.BACKOFF_MAX)
        for n in range(healthcheck.ATTEMPTS - 1)
    )
    worst_case = healthcheck.ATTEMPTS * healthcheck.REQUEST_TIMEOUT + waits

    for dockerfile in DOCKER_DIR.glob("*.Dockerfile"):
        match = re.search(r"HEALTHCHECK .*--timeout=(\d+)s", dockerfile.read_text())
        assert match, dockerfile.name
        assert worst_case < int(match.group(1)), dockerfile.name
