"""Graph connectivity algorithms built on :class:`DisjointSet`."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Sequence

import numpy as np

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .config import ConnectivityConfig
from .structures import DisjointSet


class Edge(NamedTuple):
    """An undirected edge between two element ids."""

    source: int
    target: int
    weight: float = 1.0


@dataclass
class SpanningForest:
    """Result bundle returned by :func:`minimum_spanning_tree`."""

    edges: List[Edge]
    total_weight: float
    components: int

    @property
    def is_tree(self) -> bool:
        return self.components == 1


def _as_edge(edge: Sequence) -> Edge:
    if isinstance(edge, Edge):
        return edge
    if len(edge) == 2:
        source, target = edge
        return Edge(source, target)
    if len(edge) == 3:
        source, target, weight = edge
        try:
            weight = float(weight)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Edge weight must be a number, got {weight!r}") from exc
        return Edge(source, target, weight)
    raise ValueError(f"Edge must have 2 or 3 items, got {len(edge)}")


def _progress(items: Sequence, config: ConnectivityConfig, desc: str) -> Iterable:
    if items and config.use_tqdm and _TQDM_AVAILABLE:
        return tqdm(items, desc=desc, unit="edge")
    return items


def count_components(n: int, edges: Iterable[Sequence], config: ConnectivityConfig | None = None) -> int:
    """Return the number of connected components of the graph on `n` nodes."""

    config = config or ConnectivityConfig()
    clusters = DisjointSet(n)
    edge_list = [_as_edge(edge) for edge in edges]
    for edge in _progress(edge_list, config, "   Unifying edges"):
        clusters.unify(edge.source, edge.target)
    if config.verbose:
        print(f"   {n} nodes, {len(edge_list)} edges -> {clusters.components()} components")
    return clusters.components()


def component_labels(clusters: DisjointSet) -> np.ndarray:
    """Return the root of every element; equal labels mean connected."""

    return np.fromiter((clusters.find(index) for index in range(clusters.size)), dtype=np.int64, count=clusters.size)


def has_cycle(n: int, edges: Iterable[Sequence], config: ConnectivityConfig | None = None) -> bool:
    """Return True when some edge closes a cycle. Self-loops count."""

    config = config or ConnectivityConfig()
    clusters = DisjointSet(n)
    edge_list = [_as_edge(edge) for edge in edges]
    for position, edge in enumerate(_progress(edge_list, config, "   Checking edges")):
        if clusters.connected(edge.source, edge.target):
            if config.verbose:
                print(f"   Edge #{position} ({edge.source}, {edge.target}) closes a cycle")
            return True
        clusters.unify(edge.source, edge.target)
    return False


def minimum_spanning_tree(
    n: int,
    edges: Iterable[Sequence],
    config: ConnectivityConfig | None = None,
) -> SpanningForest:
    """Run Kruskal's algorithm and return the minimum spanning forest.

    Edges of equal weight are considered in input order. When the graph is
    disconnected the result spans every component and ``components`` is
    greater than one.
    """

    config = config or ConnectivityConfig()
    t0 = time.time()
    clusters = DisjointSet(n)
    edge_list = [_as_edge(edge) for edge in edges]
    # the Kruskal loop can stop before reaching every edge
    for edge in edge_list:
        clusters.find(edge.source)
        clusters.find(edge.target)

    weights = np.asarray([edge.weight for edge in edge_list], dtype=float)
    if not np.all(np.isfinite(weights)):
        raise ValueError("Edge weights must be finite")
    order = np.argsort(weights, kind="stable")
    ordered = [edge_list[int(index)] for index in order]

    chosen: List[Edge] = []
    for edge in _progress(ordered, config, "   Kruskal"):
        if clusters.components() == 1:
            break
        if clusters.connected(edge.source, edge.target):
            continue
        clusters.unify(edge.source, edge.target)
        chosen.append(edge)

    total = math.fsum(edge.weight for edge in chosen)
    if config.verbose:
        print(
            f"   Kept {len(chosen)} of {len(edge_list)} edges, total weight {total:g}, "
            f"{clusters.components()} components. Done in {time.time() - t0:.2f}s"
        )
    return SpanningForest(edges=chosen, total_weight=total, components=clusters.components())


__all__ = [
    "Edge",
    "SpanningForest",
    "component_labels",
    "count_components",
    "has_cycle",
    "minimum_spanning_tree",
]
