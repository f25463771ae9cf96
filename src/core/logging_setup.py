"""Configuración del logging de la CLI.

Por qué stderr:
- stdout transporta el documento formateado y debe quedar idéntico byte a byte;
  los logs (vía Rich) van siempre a stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(name: str, *, verbose: bool = False) -> int:
    """Traduce un nombre de nivel a la constante de logging; los desconocidos valen WARNING."""

    if verbose:
        return logging.DEBUG
    return _LEVELS.get(name.strip().upper(), logging.WARNING)


def configure_logging(level_name: str = "WARNING", *, verbose: bool = False) -> int:
    level = resolve_level(level_name, verbose=verbose)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)

    # httpx/httpcore son muy verbosos en DEBUG; solo se muestran con --verbose.
    noisy = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("httpx").setLevel(noisy)
    logging.getLogger("httpcore").setLevel(max(noisy, logging.INFO))

    return level
