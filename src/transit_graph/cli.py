# src/transit_graph/cli.py
import argparse
import logging
import sys

from transit_graph.graph.algorithms import bfs, dfs, dijkstra, prim_mst, shortest_path
from transit_graph.graph.errors import GraphError
from transit_graph.network import DEFAULT_NETWORK
from transit_graph import render

logger = logging.getLogger(__name__)


def cmd_show(args, network):
    g = network.build_graph(sort_neighbors=args.sorted)
    print(render.format_adjacency(g))
    print()
    print(render.format_transit_network(g, network))


def cmd_dfs(args, network):
    g = network.build_graph(sort_neighbors=args.sorted)
    order = dfs(g, args.start)
    print(render.format_traversal(
        f"Metro Route Exploration (DFS) from Station {args.start} ({network.label(args.start)}):", order, network))


def cmd_bfs(args, network):
    g = network.build_graph(sort_neighbors=args.sorted)
    order = bfs(g, args.start)
    print(render.format_traversal(
        f"Layer-by-Layer Reach (BFS) from Station {args.start} ({network.label(args.start)}):", order, network))


def cmd_dijkstra(args, network):
    g = network.build_graph(sort_neighbors=args.sorted)
    print(render.format_distances(args.start, dijkstra(g, args.start), network))


def cmd_route(args, network):
    g = network.build_graph(sort_neighbors=args.sorted)
    path, cost = shortest_path(g, args.src, args.dst)
    print("=== RESULTADO ===")
    print("Origen:", network.label(args.src))
    print("Destino:", network.label(args.dst))
    print(render.format_path(path, cost, network))

    if args.plot:
        try:
            from transit_graph.viz.visualizer import draw_network
        except ImportError:
            print("Visualización no disponible. Instala networkx y matplotlib.")
            return
        draw_network(g, network, highlight_path=path,
                     title=f"Ruta: {network.label(args.src)} → {network.label(args.dst)}")


def cmd_mst(args, network):
    g = network.build_graph(sort_neighbors=args.sorted)
    print(render.format_mst(prim_mst(g, args.start), network))


def cmd_plot(args, network):
    try:
        from transit_graph.viz.visualizer import draw_network
    except ImportError:
        print("Visualización no disponible. Instala networkx y matplotlib.")
        return
    g = network.build_graph(sort_neighbors=args.sorted)
    edges = prim_mst(g, args.start) if args.mst else None
    draw_network(g, network, highlight_edges=edges, title="Metro network" + (" (MST)" if args.mst else ""))


COMMANDS = {
    "show": cmd_show,
    "dfs": cmd_dfs,
    "bfs": cmd_bfs,
    "dijkstra": cmd_dijkstra,
    "route": cmd_route,
    "mst": cmd_mst,
    "plot": cmd_plot,
}


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--sorted", action="store_true", help="Ordenar las listas de vecinos por (vecino, peso)")
    common.add_argument("-v", "--verbose", action="store_true", help="Log de depuración")

    with_start = argparse.ArgumentParser(add_help=False)
    with_start.add_argument("--start", type=int, default=0, help="Estación de inicio (por defecto 0)")

    p = argparse.ArgumentParser(prog="transit-graph", description="Recorridos, caminos mínimos y MST sobre la red de metro")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("show", parents=[common], help="Mostrar listas de adyacencia y la red")
    sub.add_parser("dfs", parents=[common, with_start], help="Recorrido en profundidad")
    sub.add_parser("bfs", parents=[common, with_start], help="Recorrido en anchura")
    sub.add_parser("dijkstra", parents=[common, with_start], help="Distancias mínimas desde una estación")
    pr = sub.add_parser("route", parents=[common], help="Ruta más corta entre dos estaciones")
    pr.add_argument("--from", dest="src", type=int, required=True, help="estación origen")
    pr.add_argument("--to", dest="dst", type=int, required=True, help="estación destino")
    pr.add_argument("--plot", action="store_true", help="Mostrar gráfica de la ruta (si hay dependencias)")
    sub.add_parser("mst", parents=[common, with_start], help="Árbol de expansión mínima (Prim)")
    pp = sub.add_parser("plot", parents=[common, with_start], help="Dibujar la red (si hay dependencias)")
    pp.add_argument("--mst", action="store_true", help="Resaltar el MST")
    return p


def main(argv=None, network=DEFAULT_NETWORK):
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s", args.cmd)
    try:
        COMMANDS[args.cmd](args, network)
    except GraphError as e:
        p.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
