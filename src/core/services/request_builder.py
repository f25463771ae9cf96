"""Resolución de opciones y construcción de la petición a blackd.

Por qué funciones puras:
- `overlay` y `build_request` no hacen I/O; son deterministas y se testean sin
  servidor ni ficheros.
- La precedencia (CLI sobre pyproject) vive en un único sitio.
"""

from __future__ import annotations

from core.domain.models import FormatOptions, FormatRequest, ServiceEndpoint

FAST_OR_SAFE_HEADER = "X-Fast-Or-Safe"
CONTENT_TYPE_HEADER = "Content-Type"
TARGET_VERSION_HEADER = "X-Target-Version"
LINE_LENGTH_HEADER = "X-Line-Length"

FAST_MODE = "fast"
PLAIN_TEXT_UTF8 = "text/plain; charset=utf-8"


def overlay(base: FormatOptions | None, override: FormatOptions | None) -> FormatOptions:
    """Fusiona dos conjuntos parciales campo a campo; `override` gana.

    Un campo en `override` cuenta como presente si no es `None`. Ninguno de los
    argumentos se modifica.
    """

    base = base or FormatOptions()
    override = override or FormatOptions()

    line_length = override.line_length if override.line_length is not None else base.line_length
    target_versions = (
        override.target_versions if override.target_versions is not None else base.target_versions
    )
    return FormatOptions(line_length=line_length, target_versions=target_versions)


def build_headers(options: FormatOptions) -> dict[str, str]:
    headers: dict[str, str] = {
        FAST_OR_SAFE_HEADER: FAST_MODE,
        CONTENT_TYPE_HEADER: PLAIN_TEXT_UTF8,
    }
    if options.target_versions:
        # El orden codifica prioridad para blackd.
        headers[TARGET_VERSION_HEADER] = ",".join(options.target_versions)
    if options.line_length is not None:
        headers[LINE_LENGTH_HEADER] = str(options.line_length)
    return headers


def build_request(
    options: FormatOptions,
    endpoint: ServiceEndpoint,
    source_text: str,
) -> FormatRequest:
    """Construye la `FormatRequest` que el transporte enviará tal cual."""

    return FormatRequest(
        endpoint=endpoint,
        options=options,
        source_text=source_text,
        headers=build_headers(options),
    )
