"""Orquestación del viaje de ida y vuelta a blackd.

Por qué aquí:
- La CLI solo recoge entradas (stdin, flags, pyproject) e imprime resultados.
- Los pasos intermedios (resolver opciones, construir la petición, enviarla una
  vez, clasificar la respuesta) se prueban sin terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.models import FormatOptions, FormatOutcome, FormatRequest, ServiceEndpoint
from core.interfaces.transport import FormatterTransport
from core.services.request_builder import build_request, overlay
from core.services.response_classifier import classify

logger = logging.getLogger(__name__)


@dataclass
class FormatJob:
    """Entradas de una invocación, ya parseadas y validadas."""

    source_text: str
    endpoint: ServiceEndpoint
    config_options: FormatOptions | None = None
    cli_options: FormatOptions | None = None

    def effective_options(self) -> FormatOptions:
        return overlay(self.config_options, self.cli_options)


@dataclass
class PipelineResult:
    """Salida del pipeline: la petición enviada y su resultado."""

    request: FormatRequest
    outcome: FormatOutcome


def format_source(
    source_text: str,
    options: FormatOptions,
    endpoint: ServiceEndpoint,
    *,
    transport: FormatterTransport,
) -> FormatOutcome:
    """Envía `source_text` a blackd una sola vez y clasifica la respuesta."""

    request = build_request(options, endpoint, source_text)
    return _send_and_classify(request, transport)


def run_job(job: FormatJob, *, transport: FormatterTransport) -> PipelineResult:
    options = job.effective_options()
    logger.debug(
        "Effective options: line_length=%s target_versions=%s",
        options.line_length,
        options.target_versions,
    )
    request = build_request(options, job.endpoint, job.source_text)
    return PipelineResult(request=request, outcome=_send_and_classify(request, transport))


def _send_and_classify(request: FormatRequest, transport: FormatterTransport) -> FormatOutcome:
    status_code, body = transport.send(request)
    outcome = classify(status_code, body, request.source_text)
    logger.debug("blackd answered %s -> %s", status_code, outcome.kind.value)
    return outcome
