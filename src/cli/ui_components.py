"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica del comando con detalles de presentación.
- stdout queda reservado para el documento formateado; todo lo visual va a
  stderr.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.config import APP_NAME, APP_VERSION

ERROR_PREFIX = f"Error formatting with {APP_NAME}: "


def build_error_console() -> Console:
    """Consola de stderr que no reinterpreta ni corta el mensaje.

    Por qué sin markup/highlight/wrap:
    - Los mensajes de blackd contienen código Python (`[`, `]`, números) que
      Rich colorearía o interpretaría como markup.
    """

    return Console(stderr=True, highlight=False, soft_wrap=True)


def error_text(message: str) -> Text:
    text = Text(ERROR_PREFIX, style="bold red")
    text.append(message)
    return text


def print_error(console: Console, message: str) -> None:
    console.print(error_text(message))


def version_line() -> str:
    return f"{APP_NAME} v{APP_VERSION}"
