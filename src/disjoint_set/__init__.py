"""Disjoint-set library initialization."""

from .structures import DisjointSet, InvalidArgumentError, OutOfRangeError
from .config import ConnectivityConfig
from .graph import (
    Edge,
    SpanningForest,
    component_labels,
    count_components,
    has_cycle,
    minimum_spanning_tree,
)
from .frame import edges_from_dataframe

__all__ = [
    "DisjointSet",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ConnectivityConfig",
    "Edge",
    "SpanningForest",
    "component_labels",
    "count_components",
    "has_cycle",
    "minimum_spanning_tree",
    "edges_from_dataframe",
]
