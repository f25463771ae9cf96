"""Entrada/salida estándar del proceso.

Política de lectura:
- Un fallo al leer stdin (error de sistema o bytes que no son UTF-8) se trata
  como entrada vacía y se registra como warning; la petición se envía igual.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

import typer

logger = logging.getLogger(__name__)


def read_stdin(stream: BinaryIO | None = None) -> str:
    """Lee todo stdin como un único string UTF-8."""

    try:
        # Con stdin cerrado (`<&-`) ni siquiera existe el stream.
        stream = stream or typer.get_binary_stream("stdin")
        return stream.read().decode("utf-8")
    except (OSError, RuntimeError, ValueError) as exc:
        logger.warning("Could not read stdin, sending empty input: %s", exc)
        return ""


def write_stdout(text: str, stream: BinaryIO | None = None) -> None:
    """Escribe `text` en stdout byte a byte, sin añadir salto de línea."""

    stream = stream or typer.get_binary_stream("stdout")
    stream.write(text.encode("utf-8"))
    stream.flush()
