"""NetworkX conversion and Matplotlib rendering of graphs and paths.

Example:

```python
from pathgraph.visualize import draw_graph
ax = draw_graph(g, g.shortest_path("A", "C"), show_weights=True)
ax.figure.savefig("graph.png")
```
"""

from __future__ import annotations

from typing import Optional, Set, Tuple, Union

import matplotlib.pyplot as plt
import networkx as nx

from .exceptions import ConfigError
from .graph import Graph
from .path import Path

LAYOUTS = ("spring", "kamada_kawai", "shell", "circular")


def to_networkx(G: Graph) -> Union[nx.DiGraph, nx.Graph]:
    """Return a NetworkX copy of ``G`` with a ``weight`` attribute per edge.

    Directed graphs become :class:`networkx.DiGraph`, undirected graphs
    :class:`networkx.Graph`. Vertex order is preserved.
    """
    out = nx.DiGraph() if G.directed else nx.Graph()
    out.add_nodes_from(G.names())
    for u, v, w in G.edges():
        out.add_edge(u, v, weight=w)
    return out


def _layout(nxg: nx.Graph, layout: str) -> dict:
    if layout == "spring":
        return nx.spring_layout(nxg, seed=42)
    if layout == "kamada_kawai":
        return nx.kamada_kawai_layout(nxg)
    if layout == "shell":
        return nx.shell_layout(nxg)
    if layout == "circular":
        return nx.circular_layout(nxg)
    raise ConfigError(f"unknown layout {layout!r}; expected one of {LAYOUTS}")


def draw_graph(
    G: Graph,
    path: Optional[Path] = None,
    *,
    ax: Optional[plt.Axes] = None,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 300,
) -> plt.Axes:
    """Render ``G``, highlighting the vertices and edges of ``path``.

    Args:
        G: Graph to draw.
        path: Optional path to highlight.
        ax: Axes to draw on; a new figure is created when omitted.
        layout: One of ``spring``, ``kamada_kawai``, ``shell``, ``circular``.
        show_weights: Label edges with their weights.
        node_size: Marker size for vertices.

    Returns:
        The axes that were drawn on.

    Raises:
        ConfigError: If ``layout`` is unknown.
    """
    nxg = to_networkx(G)
    pos = _layout(nxg, layout)
    if ax is None:
        _fig, ax = plt.subplots(figsize=(8, 6))

    on_path: Set[str] = set()
    path_edges: Set[Tuple[str, str]] = set()
    if path is not None:
        on_path = set(path.names)
        names = path.names
        path_edges = set(zip(names, names[1:]))
        if not G.directed:
            path_edges |= {(v, u) for u, v in path_edges}

    node_colors = ["tab:red" if n in on_path else "tab:blue" for n in nxg.nodes]
    edge_colors = ["tab:red" if (u, v) in path_edges else "gray" for u, v in nxg.edges]
    edge_widths = [2.5 if (u, v) in path_edges else 1.0 for u, v in nxg.edges]

    nx.draw_networkx_nodes(nxg, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)
    draw_kwargs = {"arrowstyle": "->", "arrowsize": 12} if G.directed else {}
    nx.draw_networkx_edges(
        nxg, pos, ax=ax, edge_color=edge_colors, width=edge_widths, alpha=0.7, **draw_kwargs
    )
    nx.draw_networkx_labels(nxg, pos, ax=ax, font_size=8)
    if show_weights:
        labels = {(u, v): d["weight"] for u, v, d in nxg.edges(data=True)}
        nx.draw_networkx_edge_labels(nxg, pos, ax=ax, edge_labels=labels, font_size=7)

    title = "Directed graph" if G.directed else "Undirected graph"
    if path is not None:
        title += f": {path} (distance {path.total_distance})"
    ax.set_title(title)
    ax.set_axis_off()
    return ax


__all__ = ["to_networkx", "draw_graph"]
