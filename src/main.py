"""Atajo para `cd src && python -m main`.

Equivale al script `blackd-client`; útil para probar cambios con un blackd
local sin reinstalar el paquete.
"""

from __future__ import annotations

import sys

# En consolas Windows (cp1252) los mensajes de error de blackd pueden traer
# caracteres fuera del code page.
if sys.platform == "win32":
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
