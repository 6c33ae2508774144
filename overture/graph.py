"""Directed graph with a source and a sink, whose nodes and edges are looked up by key."""

from __future__ import annotations

import enum
import sys
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, TextIO

SOURCE_INDEX = 0
SINK_INDEX = 1
OTHER_INDEX = 2


class GraphDir(enum.Enum):
    """Traversal direction."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()

    def reverse(self) -> GraphDir:
        """Return the opposite direction."""
        return GraphDir.BACKWARD if self is GraphDir.FORWARD else GraphDir.FORWARD


@dataclass(eq=False)
class GraphEdge:
    """Edge between two nodes, linked into the edge lists of both endpoints."""

    from_node: GraphNode
    to_node: GraphNode
    next_in: GraphEdge | None = None
    next_out: GraphEdge | None = None
    user_data: list[Any] = field(default_factory=list)

    def next_edge(self, direction: GraphDir) -> GraphEdge | None:
        """Return the edge after this one in the list walked in `direction`."""
        return self.next_out if direction is GraphDir.FORWARD else self.next_in

    def endpoint(self, direction: GraphDir) -> GraphNode:
        """Return the target when going forward, the source when going backward."""
        return self.to_node if direction is GraphDir.FORWARD else self.from_node


@dataclass(eq=False)
class GraphNode:
    """Graph node with a unique index and a key identifying it."""

    index: int
    key: Hashable | None
    ins: GraphEdge | None = None
    outs: GraphEdge | None = None
    user_data: list[Any] = field(default_factory=list)

    def first_edge(self, direction: GraphDir) -> GraphEdge | None:
        """Return the first outgoing (forward) or incoming (backward) edge."""
        return self.outs if direction is GraphDir.FORWARD else self.ins

    def edges(self, direction: GraphDir) -> Iterator[GraphEdge]:
        """Yield the outgoing (forward) or incoming (backward) edges, newest first."""
        edge = self.first_edge(direction)
        while edge is not None:
            yield edge
            edge = edge.next_edge(direction)

    def __repr__(self) -> str:
        return f"GraphNode(index={self.index}, key={self.key!r})"


class Graph:
    """Directed graph with a dedicated source and sink node."""

    def __init__(
        self,
        node_data_size: int = 0,
        edge_data_size: int = 0,
        source_key: Hashable | None = None,
        sink_key: Hashable | None = None,
    ) -> None:
        if source_key is not None and source_key == sink_key:
            raise ValueError("source and sink keys must differ")
        self.node_data_size = node_data_size
        self.edge_data_size = edge_data_size
        self.source = GraphNode(SOURCE_INDEX, source_key, user_data=[None] * node_data_size)
        self.sink = GraphNode(SINK_INDEX, sink_key, user_data=[None] * node_data_size)
        self.node_count = OTHER_INDEX
        self.nodes: dict[Hashable, GraphNode] = {}
        self.edges: dict[tuple[GraphNode, GraphNode], GraphEdge] = {}
        if source_key is not None:
            self.nodes[source_key] = self.source
        if sink_key is not None:
            self.nodes[sink_key] = self.sink

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def source_for(self, direction: GraphDir) -> GraphNode:
        """Return the source going forward, the sink going backward."""
        return self.source if direction is GraphDir.FORWARD else self.sink

    def sink_for(self, direction: GraphDir) -> GraphNode:
        """Return the sink going forward, the source going backward."""
        return self.source_for(direction.reverse())

    def find(self, key: Hashable) -> GraphNode | None:
        """Return the node with the given key, or None."""
        return self.nodes.get(key)

    def insert(self, key: Hashable) -> GraphNode:
        """Return the node with the given key, creating it if needed."""
        node = self.nodes.get(key)
        if node is not None:
            return node
        node = GraphNode(self.node_count, key, user_data=[None] * self.node_data_size)
        self.node_count += 1
        self.nodes[key] = node
        return node

    def connect(self, from_node: GraphNode, to_node: GraphNode) -> GraphEdge:
        """Return the edge between two nodes, creating it if needed."""
        if from_node is self.sink:
            raise ValueError("the sink cannot have outgoing edges")
        if to_node is self.source:
            raise ValueError("the source cannot have incoming edges")
        edge = self.edges.get((from_node, to_node))
        if edge is not None:
            return edge
        edge = GraphEdge(
            from_node,
            to_node,
            next_in=to_node.ins,
            next_out=from_node.outs,
            user_data=[None] * self.edge_data_size,
        )
        to_node.ins = edge
        from_node.outs = edge
        self.edges[(from_node, to_node)] = edge
        return edge

    def disconnect(self, from_node: GraphNode, to_node: GraphNode) -> bool:
        """Remove the edge between two nodes; return whether it existed."""
        edge = self.edges.pop((from_node, to_node), None)
        if edge is None:
            return False
        _unlink(from_node, edge, GraphDir.FORWARD)
        _unlink(to_node, edge, GraphDir.BACKWARD)
        return True

    def _traverse(self, direction: GraphDir, post_order: bool) -> list[GraphNode]:
        start = self.source_for(direction)
        order: list[GraphNode] = [] if post_order else [start]
        visited = {start}
        stack: list[tuple[GraphNode, Iterator[GraphEdge]]] = [(start, start.edges(direction))]
        while stack:
            node, edges = stack[-1]
            for edge in edges:
                endpoint = edge.endpoint(direction)
                if endpoint not in visited:
                    visited.add(endpoint)
                    stack.append((endpoint, endpoint.edges(direction)))
                    if not post_order:
                        order.append(endpoint)
                    break
            else:
                if post_order:
                    order.append(node)
                stack.pop()
        return order

    def compute_post_order(self, direction: GraphDir) -> list[GraphNode]:
        """Return the nodes reachable from the start of `direction` in post-order."""
        return self._traverse(direction, post_order=True)

    def compute_depth_first_order(self, direction: GraphDir) -> list[GraphNode]:
        """Return the nodes reachable from the start of `direction` in depth-first order."""
        return self._traverse(direction, post_order=False)

    def write_dot(self, file: TextIO) -> None:
        """Write the graph to `file` in the dot format."""
        file.write("digraph {\n")
        for edge in self.edges.values():
            file.write(f"    {_label(edge.from_node)} -> {_label(edge.to_node)}\n")
        file.write("}\n")

    def dump(self) -> None:
        """Write the graph to standard output in the dot format."""
        self.write_dot(sys.stdout)
        sys.stdout.flush()


def _label(node: GraphNode) -> str:
    if node.index == SOURCE_INDEX:
        return "source"
    if node.index == SINK_INDEX:
        return "sink"
    return str(node.index)


def _unlink(node: GraphNode, edge: GraphEdge, direction: GraphDir) -> None:
    forward = direction is GraphDir.FORWARD
    if node.first_edge(direction) is edge:
        if forward:
            node.outs = edge.next_out
        else:
            node.ins = edge.next_in
        return
    for prev in node.edges(direction):
        if prev.next_edge(direction) is edge:
            if forward:
                prev.next_out = edge.next_out
            else:
                prev.next_in = edge.next_in
            return