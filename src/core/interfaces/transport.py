"""Contrato del transporte hacia blackd.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline no sabe si habla con httpx, con un `MockTransport` o con un stub
  de tests; solo necesita código de estado + cuerpo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import FormatRequest


@runtime_checkable
class FormatterTransport(Protocol):
    """Contrato mínimo para enviar una `FormatRequest`.

    Reglas de diseño:
    - `send` es síncrono: exactamente un POST por invocación, sin reintentos.
    - Devuelve `(status_code, body)`; los fallos de red se elevan como
      `core.errors.TransportError`.
    """

    def send(self, request: FormatRequest) -> tuple[int, str]:
        """Envía la petición y devuelve el código HTTP y el cuerpo decodificado."""

        ...
