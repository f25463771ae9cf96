"""Lanzador desde la raíz del repo: `echo "x=1" | python -m main --line-length 100`.

Añade `src/` al path para que `cli`, `core` y `adapters` se importen sin
`pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
