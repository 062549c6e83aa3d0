# src/transit_graph/graph/algorithms.py
"""
Algoritmos sobre Graph (todos de solo lectura, no modifican el grafo):
- DFS iterativo y BFS
- Dijkstra (distancias, árbol de caminos mínimos, shortest_path)
- Prim (MST)
"""
import heapq
import logging
import math
from collections import deque
from typing import List, Optional, Sequence, Tuple

from .model import Graph, Edge

logger = logging.getLogger(__name__)


# -------------------------
# RECORRIDOS
# -------------------------
def dfs(graph: Graph, start: int) -> List[int]:
    """
    DFS iterativo con pila explícita.
    Los vecinos se apilan en el orden guardado, así que se visitan en orden inverso
    en cada rama. Las entradas duplicadas en la pila se descartan al sacarlas.
    Los vértices no alcanzables no aparecen en el resultado.
    """
    graph.check_vertex(start, what="start vertex")
    visited = [False] * len(graph)
    order: List[int] = []
    stack = [start]

    while stack:
        u = stack.pop()
        if visited[u]:
            continue
        visited[u] = True
        order.append(u)
        for v, _ in graph.neighbors(u):
            if not visited[v]:
                stack.append(v)

    return order


def bfs(graph: Graph, start: int) -> List[int]:
    """
    BFS con cola FIFO. El vértice se marca al encolarlo (nunca se encola dos veces).
    """
    graph.check_vertex(start, what="start vertex")
    visited = [False] * len(graph)
    visited[start] = True
    order: List[int] = []
    q = deque([start])

    while q:
        u = q.popleft()
        order.append(u)
        for v, _ in graph.neighbors(u):
            if not visited[v]:
                visited[v] = True
                q.append(v)

    return order


# -------------------------
# DIJKSTRA + UTIL
# -------------------------
def shortest_path_tree(graph: Graph, start: int) -> Tuple[List[float], List[Optional[int]]]:
    """
    Dijkstra con borrado perezoso: las entradas obsoletas se quedan en el heap
    y se descartan al sacarlas (d > dist[u]).
    retorna: (dist, prev) indexados por vértice; dist[v] = math.inf si v no es alcanzable,
    prev[v] = predecesor en el camino mínimo (None para start y no alcanzables).
    """
    graph.check_vertex(start, what="start vertex")
    n = len(graph)
    dist: List[float] = [math.inf] * n
    prev: List[Optional[int]] = [None] * n
    dist[start] = 0
    pq: List[Tuple[float, int]] = [(0, start)]

    while pq:
        d, u = heapq.heappop(pq)
        if d > dist[u]:
            continue
        for v, w in graph.neighbors(u):
            alt = d + w
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(pq, (alt, v))

    return dist, prev


def dijkstra(graph: Graph, start: int) -> List[float]:
    """Distancias mínimas desde start a cada vértice (math.inf = no alcanzable)."""
    dist, _ = shortest_path_tree(graph, start)
    return dist


def reconstruct_path(prev: Sequence[Optional[int]], source: int, target: int) -> Optional[List[int]]:
    """
    Reconstruye el camino desde source hasta target usando prev.
    Devuelve None si target no es alcanzable; si source==target devuelve [source].
    """
    if source == target:
        return [source]
    if prev[target] is None:
        return None
    path: List[int] = []
    u: Optional[int] = target
    while u is not None:
        path.append(u)
        if u == source:
            break
        u = prev[u]
    if path[-1] != source:
        return None
    path.reverse()
    return path


def shortest_path(graph: Graph, source: int, target: int) -> Tuple[Optional[List[int]], float]:
    """
    Wrapper: devuelve (path, cost) utilizando Dijkstra.
    Si no hay camino, devuelve (None, inf).
    """
    graph.check_vertex(target, what="target vertex")
    dist, prev = shortest_path_tree(graph, source)
    if dist[target] == math.inf:
        return None, math.inf
    return reconstruct_path(prev, source, target), dist[target]


# -------------------------
# PRIM (MST)
# -------------------------
def prim_mst(graph: Graph, start: int = 0) -> List[Edge]:
    """
    Prim con heap de (peso, desde, hasta). Los empates se resuelven por el orden
    natural de la tupla: peso, luego desde, luego hasta.

    Si el grafo no es conexo solo se cubre la componente de start: el heap se
    vacía antes de juntar N-1 aristas y se devuelven menos, sin error.
    """
    graph.check_vertex(start, what="start vertex")
    n = len(graph)
    included = [False] * n
    included[start] = True
    pq: List[Tuple[float, int, int]] = [(w, start, v) for v, w in graph.neighbors(start)]
    heapq.heapify(pq)
    mst: List[Edge] = []

    while pq and len(mst) < n - 1:
        w, u, v = heapq.heappop(pq)
        if included[v]:
            continue
        included[v] = True
        mst.append(Edge(u, v, w))
        for x, wx in graph.neighbors(v):
            if not included[x]:
                heapq.heappush(pq, (wx, v, x))

    if len(mst) < n - 1:
        logger.warning("Graph is not connected: MST from %d covers %d of %d vertices", start, len(mst) + 1, n)
    return mst


def total_weight(edges: Sequence[Edge]) -> float:
    return sum(e.weight for e in edges)
