"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (`frozen`): cada invocación produce valores nuevos
  en vez de mutar estado compartido.

Nota:
- Estos modelos describen *qué* se envía a blackd y *qué* se obtiene, no *cómo*.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_BLACKD_URL = "http://localhost:45484"


class FormatOptions(BaseModel):
    """Opciones de formateo parciales (config file, CLI o ya resueltas).

    Cada campo es opcional: `None` significa "no especificado por esta fuente".
    """

    model_config = ConfigDict(frozen=True)

    line_length: int | None = Field(
        default=None,
        ge=1,
        description="Longitud máxima de línea (X-Line-Length).",
    )
    target_versions: tuple[str, ...] | None = Field(
        default=None,
        description="Versiones objetivo en orden de prioridad (X-Target-Version).",
    )


class ServiceEndpoint(BaseModel):
    """URL del servidor blackd."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        default=DEFAULT_BLACKD_URL,
        min_length=1,
        description="URL a la que se hace el POST.",
    )


class FormatRequest(BaseModel):
    """Petición lista para enviarse: endpoint + opciones + cuerpo + headers."""

    model_config = ConfigDict(frozen=True)

    endpoint: ServiceEndpoint
    options: FormatOptions
    source_text: str = Field(
        ...,
        description="Texto fuente crudo; se envía tal cual como cuerpo.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers HTTP derivados de las opciones.",
    )


class OutcomeKind(str, Enum):
    """Los cinco finales posibles de un viaje de ida y vuelta a blackd."""

    REFORMATTED = "reformatted"
    UNCHANGED = "unchanged"
    SYNTAX_ERROR = "syntax_error"
    FORMATTING_ERROR = "formatting_error"
    UNKNOWN = "unknown"


class _Outcome(BaseModel):
    """Base común de los resultados: por defecto, éxito sin salida."""

    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return False

    @property
    def output(self) -> str | None:
        """Texto a escribir en stdout (solo en resultados exitosos)."""

        return None

    def error_message(self) -> str:
        return ""


class Reformatted(_Outcome):
    """HTTP 200: blackd devolvió el código reformateado."""

    kind: Literal[OutcomeKind.REFORMATTED] = OutcomeKind.REFORMATTED
    text: str

    @property
    def output(self) -> str:
        return self.text


class Unchanged(_Outcome):
    """HTTP 204: la entrada ya estaba bien formateada.

    `text` es siempre la entrada original; blackd no envía cuerpo en este caso.
    """

    kind: Literal[OutcomeKind.UNCHANGED] = OutcomeKind.UNCHANGED
    text: str

    @property
    def output(self) -> str:
        return self.text


class SyntaxErrorOutcome(_Outcome):
    """HTTP 400: blackd no pudo parsear el código enviado."""

    kind: Literal[OutcomeKind.SYNTAX_ERROR] = OutcomeKind.SYNTAX_ERROR
    details: str

    @property
    def is_error(self) -> bool:
        return True

    def error_message(self) -> str:
        return f"Syntax Error: {self.details}"


class FormattingError(_Outcome):
    """HTTP 500: blackd falló al formatear."""

    kind: Literal[OutcomeKind.FORMATTING_ERROR] = OutcomeKind.FORMATTING_ERROR
    details: str

    @property
    def is_error(self) -> bool:
        return True

    def error_message(self) -> str:
        return f"Formatting Error: {self.details}"


class UnknownStatus(_Outcome):
    """Cualquier otro código HTTP; se conservan código y cuerpo sin tocar."""

    kind: Literal[OutcomeKind.UNKNOWN] = OutcomeKind.UNKNOWN
    status_code: int
    body: str

    @property
    def is_error(self) -> bool:
        return True

    def error_message(self) -> str:
        return f"Unknown Error {self.status_code}: {self.body}"


FormatOutcome = Annotated[
    Union[Reformatted, Unchanged, SyntaxErrorOutcome, FormattingError, UnknownStatus],
    Field(discriminator="kind"),
]
