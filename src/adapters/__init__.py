"""Adaptadores de I/O: HTTP (httpx), pyproject.toml y stdin/stdout."""
