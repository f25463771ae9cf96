"""Lectura de la sección `[tool.black]` de `pyproject.toml`.

Por qué un adaptador:
- La búsqueda en disco (CWD hacia arriba) y el parseo TOML son I/O; el Core
  solo recibe un `FormatOptions` ya validado.
- `locate_and_parse` se llama una única vez al arrancar y su resultado se pasa
  como valor; no hay estado global.

Esquema reconocido:
    [tool.black]
    line-length = 88
    target-version = ["py311", "py312"]
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.config import DEFAULT_CONFIG_FILENAME
from core.domain.models import FormatOptions
from core.errors import ConfigFileError

logger = logging.getLogger(__name__)


class BlackToolConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    line_length: int | None = Field(
        default=None,
        ge=1,
        strict=True,
        alias="line-length",
        description="Longitud máxima de línea configurada para black.",
    )
    target_version: list[str] | None = Field(
        default=None,
        alias="target-version",
        description="Versiones de Python objetivo, en orden.",
    )

    def to_options(self) -> FormatOptions:
        target_versions = tuple(self.target_version) if self.target_version is not None else None
        return FormatOptions(line_length=self.line_length, target_versions=target_versions)


def find_config_file(start_dir: Path, filename: str = DEFAULT_CONFIG_FILENAME) -> Path | None:
    """Busca `filename` en `start_dir` y luego en cada directorio padre.

    Devuelve la primera coincidencia (la más cercana) o `None`.
    """

    start = start_dir.resolve()
    for directory in (start, *start.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path) -> FormatOptions:
    """Parsea `path` y devuelve las opciones de `[tool.black]` (posiblemente vacías)."""

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigFileError(path, exc.strerror or str(exc)) from exc
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigFileError(path, str(exc)) from exc

    tool = data.get("tool", {})
    black = tool.get("black", {}) if isinstance(tool, dict) else {}
    if not isinstance(black, dict):
        raise ConfigFileError(path, "[tool.black] must be a table")

    try:
        section = BlackToolConfig.model_validate(black)
    except ValidationError as exc:
        raise ConfigFileError(path, _summarize(exc)) from exc
    return section.to_options()


def locate_and_parse(
    start_dir: Path,
    filename: str = DEFAULT_CONFIG_FILENAME,
) -> FormatOptions | None:
    """Localiza y parsea el fichero de configuración.

    Devuelve `None` si no existe ningún fichero; la ausencia no es un error.
    """

    path = find_config_file(start_dir, filename)
    if path is None:
        logger.debug("No %s found from %s upward", filename, start_dir)
        return None

    options = load_config_file(path)
    logger.info("Loaded formatting options from %s", path)
    return options


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"tool.black.{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)
