"""Códigos de salida del proceso.

Todo resultado o fallo termina en uno de estos dos valores.
"""

SUCCESS: int = 0
FAILURE: int = 1
