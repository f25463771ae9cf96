"""Clasificación de las respuestas de blackd por código HTTP.

Por qué una función total:
- Todo entero produce exactamente un resultado; los códigos que blackd no
  documenta acaban en `UnknownStatus` con código y cuerpo intactos.
- Los cuerpos se reenvían tal cual, nunca se reescriben.
"""

from __future__ import annotations

from core.domain.models import (
    FormatOutcome,
    FormattingError,
    Reformatted,
    SyntaxErrorOutcome,
    Unchanged,
    UnknownStatus,
)

HTTP_REFORMATTED = 200
HTTP_UNCHANGED = 204
HTTP_SYNTAX_ERROR = 400
HTTP_FORMATTING_ERROR = 500


def classify(status_code: int, body: str, original_input: str) -> FormatOutcome:
    if status_code == HTTP_REFORMATTED:
        return Reformatted(text=body)
    if status_code == HTTP_UNCHANGED:
        # blackd no envía cuerpo en 204; se devuelve la entrada original.
        return Unchanged(text=original_input)
    if status_code == HTTP_SYNTAX_ERROR:
        return SyntaxErrorOutcome(details=body)
    if status_code == HTTP_FORMATTING_ERROR:
        return FormattingError(details=body)
    return UnknownStatus(status_code=status_code, body=body)

