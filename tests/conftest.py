from __future__ import annotations

import io
import os

import httpx
import pytest

from adapters.http_client import build_client

ABSENT_CONFIG = "blackd-client-test-absent.toml"


class FakeBlackd:
    """Stands in for blackd behind an `httpx.MockTransport`."""

    def __init__(self) -> None:
        self.status_code = 200
        self.body = ""
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def respond(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body.encode("utf-8"))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def fake_blackd() -> FakeBlackd:
    return FakeBlackd()


@pytest.fixture
def http_client(fake_blackd):
    with httpx.Client(transport=httpx.MockTransport(fake_blackd)) as client:
        yield client


@pytest.fixture
def cli_env(tmp_path, monkeypatch, fake_blackd):
    """Isolated CWD and environment, with the CLI wired to `fake_blackd`."""

    for key in list(os.environ):
        if key.upper().startswith("BLACKD_CLIENT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("BLACKD_CLIENT_CONFIG_FILENAME", ABSENT_CONFIG)
    monkeypatch.chdir(tmp_path)

    def _build_client(settings=None, **kwargs):
        return build_client(settings, transport=httpx.MockTransport(fake_blackd))

    monkeypatch.setattr("cli.main.build_client", _build_client)
    return tmp_path


@pytest.fixture
def set_stdin(monkeypatch):
    def _set(data: bytes) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))

    return _set
