# src/transit_graph/graph/model.py
import logging
from collections import namedtuple
from typing import Iterable, List, Tuple

from .errors import InvalidWeight, OutOfRange

logger = logging.getLogger(__name__)

Edge = namedtuple("Edge", ["src", "dest", "weight"])


class Graph:
    """
    Grafo no dirigido y ponderado sobre vértices enteros 0..N-1.
    - adj: tupla indexada por vértice -> tupla de (vecino, peso)
    - edges: aristas de entrada (una por arista no dirigida, en orden de entrada)
    - sort_neighbors: si True, cada lista de vecinos se ordena por (vecino, peso).
      El orden de las listas decide el orden de visita de DFS/BFS.

    Se construye una sola vez; después es de solo lectura.
    """
    def __init__(self, n: int, edges: Iterable[Tuple[int, int, float]] = (), sort_neighbors: bool = False):
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise ValueError(f"vertex count must be a positive integer, got {n!r}")

        adj: List[List[Tuple[int, float]]] = [[] for _ in range(n)]
        kept: List[Edge] = []
        for raw in edges:
            e = Edge(*raw)
            for endpoint in (e.src, e.dest):
                if not _in_range(endpoint, n):
                    raise OutOfRange(endpoint, n, what="edge endpoint")
            if not _valid_weight(e.weight):
                raise InvalidWeight(e.weight, e)
            # arista no dirigida: se inserta también el arco recíproco
            adj[e.src].append((e.dest, e.weight))
            adj[e.dest].append((e.src, e.weight))
            kept.append(e)

        if sort_neighbors:
            for nbrs in adj:
                nbrs.sort()

        self._n = n
        self._adj: Tuple[Tuple[Tuple[int, float], ...], ...] = tuple(tuple(nbrs) for nbrs in adj)
        self._edges: Tuple[Edge, ...] = tuple(kept)
        self._sort_neighbors = sort_neighbors
        logger.debug("Graph built: %d vertices, %d edges (sorted=%s)", n, len(kept), sort_neighbors)

    @property
    def adj(self) -> Tuple[Tuple[Tuple[int, float], ...], ...]:
        return self._adj

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def sort_neighbors(self) -> bool:
        return self._sort_neighbors

    @property
    def vertices(self) -> range:
        return range(self._n)

    def neighbors(self, u: int) -> Tuple[Tuple[int, float], ...]:
        self.check_vertex(u)
        return self._adj[u]

    def has_vertex(self, u) -> bool:
        return _in_range(u, self._n)

    def check_vertex(self, u, what: str = "vertex") -> None:
        """Lanza OutOfRange si u no es un vértice válido."""
        if not _in_range(u, self._n):
            raise OutOfRange(u, self._n, what=what)

    def to_networkx(self):
        """
        Crea un networkx.Graph equivalente (útil para dibujar y para verificar resultados).
        Requiere networkx instalado.
        """
        import networkx as nx
        G = nx.Graph()
        G.add_nodes_from(self.vertices)
        for e in self._edges:
            # con aristas paralelas networkx guarda una sola; nos quedamos con la más ligera
            if G.has_edge(e.src, e.dest) and G[e.src][e.dest]["weight"] <= e.weight:
                continue
            G.add_edge(e.src, e.dest, weight=e.weight)
        return G

    def __len__(self):
        return self._n

    def __repr__(self):
        return f"Graph(n={self._n}, edges={len(self._edges)}, sort_neighbors={self._sort_neighbors})"


def _in_range(u, n: int) -> bool:
    return isinstance(u, int) and not isinstance(u, bool) and 0 <= u < n


def _valid_weight(w) -> bool:
    # NaN no pasa: nan >= 0 es False
    return isinstance(w, (int, float)) and not isinstance(w, bool) and w >= 0
