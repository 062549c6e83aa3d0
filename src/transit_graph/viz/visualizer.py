# src/transit_graph/viz/visualizer.py
"""
Visualizador sencillo que usa networkx + matplotlib para dibujar la red y resaltar
una ruta o un conjunto de aristas (p.ej. el MST).
Si no están instalados, lanza ImportError al importarlo (CLI lo manejará).
"""
import networkx as nx
import matplotlib.pyplot as plt


def draw_network(graph, network, highlight_edges=None, highlight_path=None, title="Metro network", show=True):
    """
    graph: Graph del motor (usa graph.to_networkx())
    network: NetworkConfig, para los nombres de las estaciones
    highlight_edges: iterable de (u, v, ...) a resaltar (p.ej. resultado de prim_mst)
    highlight_path: lista de vértices (ordenados) a resaltar como ruta
    retorna la Figure de matplotlib
    """
    G = graph.to_networkx()

    fig = plt.figure(figsize=(10, 7))
    pos = nx.spring_layout(G, seed=42)

    nx.draw_networkx_nodes(G, pos, node_size=300, node_color="lightsteelblue")
    nx.draw_networkx_edges(G, pos, width=1.0, alpha=0.5)
    nx.draw_networkx_labels(G, pos, labels={v: f"{v}\n{network.label(v)}" for v in G.nodes}, font_size=7)
    nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"), font_size=7)

    if highlight_edges:
        edgelist = [(e[0], e[1]) for e in highlight_edges]
        nx.draw_networkx_edges(G, pos, edgelist=edgelist, width=2.5, edge_color="green")

    if highlight_path:
        path_edges = [(highlight_path[i], highlight_path[i + 1]) for i in range(len(highlight_path) - 1)]
        nx.draw_networkx_nodes(G, pos, nodelist=highlight_path, node_size=350, node_color="red")
        nx.draw_networkx_edges(G, pos, edgelist=path_edges, width=2.5, edge_color="red")

    plt.title(title)
    plt.axis("off")
    if show:
        plt.show()
    return fig
