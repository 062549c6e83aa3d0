import math

import pytest

from transit_graph import render
from transit_graph.cli import main
from transit_graph.graph.algorithms import prim_mst
from transit_graph.graph.model import Graph
from transit_graph.network import DEFAULT_NETWORK, NetworkConfig


def test_label_falls_back_to_number():
    assert DEFAULT_NETWORK.label(0) == "Central Hub"
    assert DEFAULT_NETWORK.label(8) == "Stadium"
    assert DEFAULT_NETWORK.label(12) == "Station 12"


def test_format_adjacency():
    g = Graph(3, [(0, 1, 4), (1, 2, 7)])
    assert render.format_adjacency(g) == (
        "Graph's adjacency list:\n"
        "0 --> (1, 4)\n"
        "1 --> (0, 4) (2, 7)\n"
        "2 --> (1, 7)"
    )


def test_format_transit_network_uses_names():
    out = render.format_transit_network(DEFAULT_NETWORK.build_graph(), DEFAULT_NETWORK)
    assert "Station 6 (Business Park) connects to:" in out
    assert "  -> Station 7 (Suburban Terminal) - Travel time: 3 min" in out


def test_format_distances_marks_unreachable():
    net = NetworkConfig(size=2, edges=())
    out = render.format_distances(0, [0, math.inf], net)
    assert "0 -> 1 : unreachable" in out


def test_format_mst_partial_warning():
    net = NetworkConfig(size=4, edges=((0, 1, 2), (2, 3, 1)))
    out = render.format_mst(prim_mst(net.build_graph()), net)
    assert "Total weight: 2" in out
    assert "partial tree (1 of 3 edges)" in out


def test_cli_dijkstra(capsys):
    assert main(["dijkstra", "--start", "0"]) == 0
    out = capsys.readouterr().out
    assert "0 -> 5 : 27" in out
    assert "0 -> 8 : 22" in out


def test_cli_dfs_and_bfs(capsys):
    main(["dfs"])
    assert "0 2 8 6 7 5 1 4 3" in capsys.readouterr().out
    main(["bfs", "--sorted"])
    assert "0 1 2 3 4 7 8 5 6" in capsys.readouterr().out


def test_cli_route(capsys):
    main(["route", "--from", "0", "--to", "5"])
    out = capsys.readouterr().out
    assert "Total travel time: 27 min" in out
    assert "Central Hub (0) -> Museum District (1)" in out


def test_cli_mst(capsys):
    main(["mst"])
    assert "Total weight: 46" in capsys.readouterr().out


def test_cli_show(capsys):
    main(["show"])
    out = capsys.readouterr().out
    assert "0 --> (1, 8) (2, 21)" in out
    assert "City Metro Network Topology:" in out


def test_cli_bad_start_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["bfs", "--start", "99"])
    assert exc.value.code == 2
    assert "out of range" in capsys.readouterr().err


def test_cli_route_plot_highlights_path(monkeypatch, capsys):
    import transit_graph.viz.visualizer as visualizer

    calls = []
    monkeypatch.setattr(visualizer, "draw_network", lambda g, network, **kw: calls.append(kw))
    main(["route", "--from", "0", "--to", "6", "--plot"])
    assert calls[0]["highlight_path"] == [0, 1, 2, 7, 6]
    assert "Total travel time: 28 min" in capsys.readouterr().out


def test_cli_route_without_plot_does_not_draw(monkeypatch):
    import transit_graph.viz.visualizer as visualizer

    calls = []
    monkeypatch.setattr(visualizer, "draw_network", lambda *a, **kw: calls.append(kw))
    main(["route", "--from", "0", "--to", "6"])
    assert calls == []
