"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout y headers comunes en un único sitio.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono para una única petición.

    Por qué un builder:
    - Sin timeout por defecto (`None`): la llamada bloquea hasta que blackd
      responda, salvo que `BLACKD_CLIENT_HTTP_TIMEOUT_SECONDS` diga otra cosa.
    - Sin redirecciones automáticas: un 3xx se reporta como estado desconocido.
    """

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )
