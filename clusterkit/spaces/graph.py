"""Adjacency-list metric space."""

import math
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .base import MetricSpace


class Node:
    """A point in a GraphSpace. Hashed by identity."""

    def __init__(self, label: Optional[Any] = None):
        self.label = label
        self._connections: Dict['Node', float] = {}

    def add_connection(self, node: 'Node', distance: float = 0.0) -> None:
        """Connect this node to another, one direction only."""
        self._connections[node] = distance

    def is_connected(self, node: 'Node') -> bool:
        return node in self._connections

    def distance_to(self, node: 'Node') -> float:
        return self._connections.get(node, math.nan)

    @property
    def neighbors(self) -> Mapping['Node', float]:
        return MappingProxyType(self._connections)

    def __repr__(self) -> str:
        if self.label is None:
            return f"Node(id={id(self):#x})"
        return f"Node({self.label!r})"


class GraphSpace(MetricSpace[Node]):
    """Metric space storing connections on the nodes themselves."""

    def add_connection(self, a: Node, b: Node, distance: float = 0.0) -> None:
        # Both directions so lookup works either way
        a.add_connection(b, distance)
        b.add_connection(a, distance)

    def distance(self, a: Node, b: Node) -> float:
        return a.distance_to(b)
