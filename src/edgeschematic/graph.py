"""
Graph snapshot module.

Indexes one frame's nodes and edges so the schematic builder can resolve
edge endpoints, detect reverse edges and collect a node's neighbours.

Uses networkx for:
- The label-keyed multigraph index (parallel edges keyed by edge id)
- Importing nodes and edges from an existing networkx graph
"""

from itertools import chain
from typing import Dict, List, Sequence, Tuple

import networkx as nx

from .models import Edge, EdgeType, Node, Point


class SchematicError(Exception):
    """Base class for errors raised while computing edge schematics."""

    pass


class NodeNotFoundError(SchematicError):
    """Raised when an edge refers to a label no node carries."""

    def __init__(self, label: str):
        super().__init__(f"no node with label {label!r}")
        self.label = label


class GraphSnapshot:
    """
    Read-only index over a consistent set of nodes and edges.

    The node and edge sequences are copied on construction, so later
    mutation of the caller's lists does not affect an existing snapshot.
    When several nodes share a label the first one wins.
    """

    def __init__(self, nodes: Sequence[Node], edges: Sequence[Edge]):
        self.nodes: List[Node] = list(nodes)
        self.edges: List[Edge] = list(edges)

        self._nodes_by_label: Dict[str, Node] = {}
        for node in self.nodes:
            self._nodes_by_label.setdefault(node.label, node)

        self.graph = nx.MultiDiGraph()
        self.graph.add_nodes_from(self._nodes_by_label)
        for edge in self.edges:
            self.graph.add_edge(edge.from_label, edge.to_label, key=edge.id)

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> "GraphSnapshot":
        """
        Build a snapshot from a networkx graph.

        Graph nodes are used as labels and must carry ``x`` and ``y``
        attributes; an ``id`` attribute defaults to the label. Edge
        attributes ``id``, ``type`` and ``weight`` are optional. Edges of
        undirected graphs default to the undirected type.

        Raises:
            ValueError: If a node has no position.
        """
        nodes = []
        for label, data in graph.nodes(data=True):
            if "x" not in data or "y" not in data:
                raise ValueError(f"node {label!r} has no 'x'/'y' position")
            nodes.append(
                Node(
                    id=str(data.get("id", label)),
                    label=str(label),
                    x=data["x"],
                    y=data["y"],
                )
            )

        default_type = EdgeType.DIRECTED if graph.is_directed() else EdgeType.UNDIRECTED
        if graph.is_multigraph():
            edge_items = graph.edges(keys=True, data=True)
        else:
            edge_items = ((u, v, None, data) for u, v, data in graph.edges(data=True))

        edges = []
        for source, target, key, data in edge_items:
            fallback_id = f"{source}-{target}" if key is None else f"{source}-{target}-{key}"
            edges.append(
                Edge(
                    id=str(data.get("id", fallback_id)),
                    from_label=str(source),
                    to_label=str(target),
                    type=data.get("type", default_type),
                    weight=data.get("weight", 1),
                )
            )

        return cls(nodes, edges)

    def get_node(self, label: str) -> Node:
        """
        Get the node carrying ``label``.

        Raises:
            NodeNotFoundError: If no node carries the label.
        """
        try:
            return self._nodes_by_label[label]
        except KeyError:
            raise NodeNotFoundError(label) from None

    def get_from_to_nodes(self, edge: Edge) -> Tuple[Node, Node]:
        """Resolve an edge's labels to its (source, destination) nodes."""
        return self.get_node(edge.from_label), self.get_node(edge.to_label)

    def is_self_loop(self, edge: Edge) -> bool:
        """Check whether both ends of the edge resolve to the same node."""
        from_node, to_node = self.get_from_to_nodes(edge)
        return from_node is to_node

    def is_bidirectional(self, edge: Edge) -> bool:
        """
        Check whether some edge runs from this edge's target to its source.

        Matching is by label only; a self-loop is never bidirectional.
        """
        reverse = self.graph.get_edge_data(edge.to_label, edge.from_label, default={})
        return edge.from_label != edge.to_label and bool(reverse)

    def neighbor_points(self, node: Node) -> List[Point]:
        """
        Positions of the nodes at the far end of every edge touching ``node``.

        Self-loops are skipped. The same neighbour appears once per edge, so
        callers deduplicate when they need distinct directions.
        """
        points = []
        label = node.label
        touching = chain(
            self.graph.out_edges(label, keys=True),
            self.graph.in_edges(label, keys=True),
        )
        for source, target, _ in touching:
            if source == target:
                continue
            other = target if source == label else source
            points.append(self.get_node(other).position)
        return points
