"""CLI (Typer): parseo de flags y presentación; la lógica vive en `core`."""
