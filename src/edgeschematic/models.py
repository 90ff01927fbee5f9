"""
Data models for edge schematic computation.

This module contains the dataclasses describing the graph snapshot handed to
the schematic builder (nodes and edges) and the schema objects it returns.
The schema objects are consumed by a rendering layer and a hit-testing layer,
neither of which is part of this package.

Classes:
    Point: A position in graph space (same units as canvas pixels).
    Node: A positioned graph node.
    Edge: A connection between two node labels.
    Text: Styled label text.
    TextArea: A label block drawn over an edge.
    LineSchema: Geometry for an undirected edge.
    ArrowSchema: Geometry for a directed edge.
    UTurnSchema: Geometry for a self-loop.
    EdgeSchematic: A tagged schema, ready for the rendering layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class EdgeType(Enum):
    """Whether an edge is drawn with an arrowhead."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class SchemaType(Enum):
    """Tag of the schema variant carried by an EdgeSchematic."""

    LINE = "line"
    ARROW = "arrow"
    UTURN = "uturn"


@dataclass(frozen=True)
class Point:
    """A 2D point in graph space."""

    x: float
    y: float


@dataclass(frozen=True)
class Node:
    """
    A positioned graph node.

    Attributes:
        id: Unique identifier of the node.
        label: Symbolic name edges use to refer to the node.
        x: Horizontal position in graph space.
        y: Vertical position in graph space (grows downwards on a canvas).
    """

    id: str
    label: str
    x: float
    y: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Edge:
    """
    A connection between two nodes, referenced by label.

    Attributes:
        id: Unique identifier of the edge.
        from_label: Label of the source node.
        to_label: Label of the destination node.
        type: Directed edges are drawn as arrows, undirected ones as lines.
        weight: Numeric weight shown in the edge label.
    """

    id: str
    from_label: str
    to_label: str
    type: EdgeType = EdgeType.DIRECTED
    weight: float = 1

    def __post_init__(self):
        if not isinstance(self.type, EdgeType):
            try:
                object.__setattr__(self, "type", EdgeType(self.type))
            except ValueError:
                raise ValueError(
                    f"edge type must be 'directed' or 'undirected', got {self.type!r}"
                ) from None


@dataclass(frozen=True)
class Text:
    """Styled label text."""

    content: str
    color: str
    font_size: float
    font_weight: str


@dataclass(frozen=True)
class TextArea:
    """
    A label block drawn over an edge.

    Attributes:
        color: Background color of the block (the canvas background).
        editable: Whether the host UI may open an editor on the label.
        text: The label text and its styling.
    """

    color: str
    editable: bool
    text: Text


@dataclass(frozen=True)
class LineSchema:
    """Geometry for an undirected edge."""

    start: Point
    end: Point
    color: str
    width: float
    text_area: Optional[TextArea] = None


@dataclass(frozen=True)
class ArrowSchema:
    """
    Geometry for a directed edge.

    Attributes:
        start: Start of the shaft (inside the source node).
        end: Tip of the arrowhead, on the destination node boundary.
        color: Stroke color.
        width: Stroke width.
        text_offset_from_center: Distance of the label from the shaft midpoint.
        text_area: Optional label block.
    """

    start: Point
    end: Point
    color: str
    width: float
    text_offset_from_center: float
    text_area: Optional[TextArea] = None


@dataclass(frozen=True)
class UTurnSchema:
    """
    Geometry for a self-loop drawn as a u-turn arrow.

    Attributes:
        center: Position of the node the loop is attached to.
        spacing: Distance between the two legs of the u-turn.
        up_distance: Length of the leg leaving the node.
        down_distance: Length of the returning leg.
        angle: Bearing (radians) the loop points towards.
        line_width: Stroke width.
        color: Stroke color.
        text_area: Optional label block.
    """

    center: Point
    spacing: float
    up_distance: float
    down_distance: float
    angle: float
    line_width: float
    color: str
    text_area: Optional[TextArea] = None


EdgeSchema = Union[LineSchema, ArrowSchema, UTurnSchema]


@dataclass(frozen=True)
class EdgeSchematic:
    """
    A tagged edge schema, identified for downstream consumers.

    Attributes:
        id: Id of the edge the schema was computed for.
        schema_type: Which variant ``schema`` holds.
        schema: The variant-specific geometry.
        graph_type: Always "edge"; lets consumers tell edges from nodes.
    """

    id: str
    schema_type: SchemaType
    schema: EdgeSchema
    graph_type: str = "edge"
