"""Excepciones del Core.

Por qué pocas excepciones:
- Las respuestas de blackd (400/500/otros) no son excepciones sino variantes de
  `FormatOutcome`; aquí solo viven los fallos que impiden obtener una respuesta.
"""

from __future__ import annotations

from pathlib import Path


class BlackdClientError(Exception):
    """Base de los errores fatales del cliente."""


class ConfigFileError(BlackdClientError):
    """El fichero de configuración existe pero no se pudo leer o validar."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid config file {path}: {reason}")
        self.path = path
        self.reason = reason


class TransportError(BlackdClientError):
    """Fallo de red/envío: no hay código de estado que clasificar."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason
