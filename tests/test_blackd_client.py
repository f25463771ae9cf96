import httpx
import pytest

from adapters.blackd_client import BlackdClient
from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import FormatOptions, ServiceEndpoint
from core.errors import TransportError
from core.interfaces.transport import FormatterTransport
from core.services.request_builder import build_request


def make_request(source="print('x')", **options):
    return build_request(
        FormatOptions(**options),
        ServiceEndpoint(url="http://blackd.test:45484"),
        source,
    )


def test_is_a_formatter_transport(http_client):
    assert isinstance(BlackdClient(http_client), FormatterTransport)


def test_posts_body_and_headers(http_client, fake_blackd):
    fake_blackd.respond(200, 'print("x")')

    status, body = BlackdClient(http_client).send(make_request(line_length=99, target_versions=("py310",)))

    assert (status, body) == (200, 'print("x")')
    sent = fake_blackd.last
    assert sent.method == "POST"
    assert (sent.url.host, sent.url.port) == ("blackd.test", 45484)
    assert sent.content == b"print('x')"
    assert sent.headers["X-Fast-Or-Safe"] == "fast"
    assert sent.headers["Content-Type"] == "text/plain; charset=utf-8"
    assert sent.headers["X-Line-Length"] == "99"
    assert sent.headers["X-Target-Version"] == "py310"


def test_body_is_sent_as_utf8(http_client, fake_blackd):
    fake_blackd.respond(204)

    BlackdClient(http_client).send(make_request("s = 'ñandú'\n"))

    assert fake_blackd.last.content == "s = 'ñandú'\n".encode("utf-8")


def test_exactly_one_request(http_client, fake_blackd):
    fake_blackd.respond(503, "busy")

    BlackdClient(http_client).send(make_request())

    assert len(fake_blackd.requests) == 1


def test_connection_failure_becomes_transport_error(http_client, fake_blackd):
    fake_blackd.error = httpx.ConnectError("Connection refused")

    with pytest.raises(TransportError) as excinfo:
        BlackdClient(http_client).send(make_request())

    assert excinfo.value.url == "http://blackd.test:45484"
    assert "Connection refused" in str(excinfo.value)


def test_build_client_defaults():
    settings = AppSettings(_env_file=None)

    with build_client(settings) as client:
        assert client.timeout.read is None
        assert client.follow_redirects is False
        assert client.headers["User-Agent"] == settings.user_agent


def test_build_client_timeout_from_settings():
    settings = AppSettings(_env_file=None, http_timeout_seconds=2.5)

    with build_client(settings) as client:
        assert client.timeout.connect == 2.5
