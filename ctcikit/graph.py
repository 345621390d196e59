"""Directed graph nodes and a breadth-first route search."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field

__all__ = ["State", "GraphNode", "Graph", "search"]


class State(enum.Enum):
    """Whether a search has already reached a node."""

    UNVISITED = "unvisited"
    VISITED = "visited"


@dataclass(eq=False)
class GraphNode:
    """A node holding a value and the nodes reachable from it in one step."""

    value: int
    nodes: list["GraphNode"] = field(default_factory=list)
    state: State = State.UNVISITED


@dataclass
class Graph:
    """A graph given as a mapping from each node to its neighbours."""

    nodes: dict[GraphNode, list[GraphNode]] = field(default_factory=dict)


def search(start: GraphNode, end: GraphNode) -> bool:
    """Return True if ``end`` can be reached from ``start``.

    Nodes reached along the way are marked as visited and stay marked.
    """
    if start is end:
        return True
    queue: deque[GraphNode] = deque([start])
    while queue:
        node = queue.popleft()
        if node.state is State.VISITED:
            continue
        node.state = State.VISITED
        if node is end:
            return True
        queue.extend(node.nodes)
    return False