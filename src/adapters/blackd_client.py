"""Cliente HTTP de blackd.

Implementa `core.interfaces.transport.FormatterTransport` sobre `httpx.Client`:
un POST con el texto crudo como cuerpo y los headers ya construidos.
"""

from __future__ import annotations

import logging

import httpx

from core.domain.models import FormatRequest
from core.errors import TransportError
from core.interfaces.transport import FormatterTransport

logger = logging.getLogger(__name__)


class BlackdClient(FormatterTransport):
    """Envía `FormatRequest`s a blackd usando un `httpx.Client` ya configurado."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def send(self, request: FormatRequest) -> tuple[int, str]:
        url = request.endpoint.url
        logger.debug("POST %s headers=%s", url, request.headers)
        try:
            response = self._client.post(
                url,
                content=request.source_text.encode("utf-8"),
                headers=request.headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(url, str(exc) or exc.__class__.__name__) from exc

        body = response.text
        logger.debug("blackd responded HTTP %s (%d bytes)", response.status_code, len(response.content))
        return response.status_code, body
