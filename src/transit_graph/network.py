# src/transit_graph/network.py
"""
Descripción de una red de transporte: número de estaciones, nombres para mostrar
y lista de aristas (src, dest, minutos). El motor de grafos solo ve enteros;
los nombres son cosa de la capa de presentación.
"""
from dataclasses import dataclass
from typing import Tuple

from transit_graph.graph.model import Edge, Graph


@dataclass(frozen=True)
class NetworkConfig:
    size: int
    edges: Tuple[Edge, ...]
    station_names: Tuple[str, ...] = ()

    def label(self, v: int) -> str:
        if isinstance(v, int) and 0 <= v < len(self.station_names):
            return self.station_names[v]
        return f"Station {v}"

    def build_graph(self, sort_neighbors: bool = False) -> Graph:
        return Graph(self.size, self.edges, sort_neighbors=sort_neighbors)


# Red de metro de ejemplo (9 estaciones).
DEFAULT_NETWORK = NetworkConfig(
    size=9,
    station_names=(
        "Central Hub",        # 0
        "Museum District",    # 1
        "Tech Park",          # 2
        "Old Town",           # 3
        "University",         # 4
        "Airport",            # 5
        "Business Park",      # 6
        "Suburban Terminal",  # 7
        "Stadium",            # 8
    ),
    edges=tuple(Edge(*e) for e in [
        (0, 1, 8), (0, 2, 21),
        (1, 2, 6), (1, 3, 5), (1, 4, 4),
        (2, 7, 11), (2, 8, 8),
        (3, 4, 9),
        (5, 6, 10), (5, 7, 15), (5, 8, 5),
        (6, 7, 3), (6, 8, 7),
    ]),
)
