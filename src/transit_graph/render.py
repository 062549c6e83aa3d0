# src/transit_graph/render.py
"""
Formateo en texto de la red y de los resultados de los algoritmos.
Todas las funciones devuelven str; imprimir es cosa del CLI.
"""
import math
from typing import List, Optional, Sequence

from transit_graph.graph.algorithms import total_weight
from transit_graph.graph.model import Edge, Graph
from transit_graph.network import NetworkConfig


def format_adjacency(graph: Graph) -> str:
    lines = ["Graph's adjacency list:"]
    for u, nbrs in enumerate(graph.adj):
        pairs = " ".join(f"({v}, {w})" for v, w in nbrs)
        lines.append(f"{u} --> {pairs}".rstrip())
    return "\n".join(lines)


def format_transit_network(graph: Graph, network: NetworkConfig) -> str:
    lines = ["City Metro Network Topology:", "=" * 28]
    for u, nbrs in enumerate(graph.adj):
        lines.append(f"Station {u} ({network.label(u)}) connects to:")
        for v, w in nbrs:
            lines.append(f"  -> Station {v} ({network.label(v)}) - Travel time: {w} min")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def format_traversal(title: str, order: Sequence[int], network: NetworkConfig) -> str:
    lines = [title, " ".join(str(v) for v in order)]
    for i, v in enumerate(order, start=1):
        lines.append(f"  {i}. {network.label(v)}")
    return "\n".join(lines)


def _fmt_cost(d: float) -> str:
    return "unreachable" if d == math.inf else str(d)


def format_distances(start: int, dist: Sequence[float], network: NetworkConfig) -> str:
    lines = [f"Shortest path from node {start} ({network.label(start)}):"]
    for v, d in enumerate(dist):
        lines.append(f"{start} -> {v} : {_fmt_cost(d)}  [{network.label(v)}]")
    return "\n".join(lines)


def format_path(path: Optional[List[int]], cost: float, network: NetworkConfig) -> str:
    if not path:
        return "No path found (unreachable)."
    stops = " -> ".join(f"{network.label(v)} ({v})" for v in path)
    return f"Route: {stops}\nTotal travel time: {_fmt_cost(cost)} min\nStops: {len(path)}"


def format_mst(edges: Sequence[Edge], network: NetworkConfig) -> str:
    lines = ["Minimum spanning tree (Prim):"]
    for e in edges:
        lines.append(
            f"  {e.src} - {e.dest} : {e.weight}  [{network.label(e.src)} - {network.label(e.dest)}]"
        )
    lines.append(f"Total weight: {total_weight(edges)}")
    if len(edges) < network.size - 1:
        lines.append(
            f"Warning: partial tree ({len(edges)} of {network.size - 1} edges); the network is not connected."
        )
    return "\n".join(lines)
