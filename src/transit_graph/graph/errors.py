# src/transit_graph/graph/errors.py
"""
Errores del motor de grafos.

Todos heredan de GraphError; además heredan de la excepción estándar más
cercana (IndexError / ValueError) para que el código que ya captura esas
excepciones siga funcionando.
"""
from typing import Any, Optional


class GraphError(Exception):
    """Error base del motor de grafos."""


class OutOfRange(GraphError, IndexError):
    """Vértice fuera de [0, N)."""

    def __init__(self, vertex: Any, size: int, what: str = "vertex"):
        self.vertex = vertex
        self.size = size
        super().__init__(f"{what} {vertex!r} out of range [0, {size})")


class InvalidWeight(GraphError, ValueError):
    """Peso negativo, NaN o no numérico donde se requiere un número no negativo."""

    def __init__(self, weight: Any, edge: Optional[tuple] = None):
        self.weight = weight
        self.edge = edge
        msg = f"invalid weight {weight!r} (must be a non-negative number)"
        if edge is not None:
            msg += f" on edge {tuple(edge)!r}"
        super().__init__(msg)
