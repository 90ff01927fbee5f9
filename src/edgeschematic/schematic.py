"""
Edge schematic builder.

Computes the rendering geometry of a graph edge:
- Endpoint placement (destination trimmed by its radius)
- Parallel offsets for bidirectional pairs
- Self-loop orientation away from the node's other edges
- Suppression when the two nodes overlap
- Optional weight label
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from .angles import dedupe_points, largest_angular_space
from .graph import GraphSnapshot
from .models import (
    ArrowSchema,
    Edge,
    EdgeSchematic,
    EdgeType,
    LineSchema,
    Node,
    Point,
    SchemaType,
    Text,
    TextArea,
    UTurnSchema,
)
from .theme import (
    BIDIRECTIONAL_SPACING_FACTOR,
    DEFAULT_ARROW_TEXT_OFFSET,
    NODE_SPACING_MARGIN,
    UTURN_DOWN_DISTANCE_RATIO,
    UTURN_UP_DISTANCE_FACTOR,
    GraphSettings,
    GraphTheme,
)
from .tracer import SchematicTrace

logger = logging.getLogger(__name__)

# Weight labels switch to exponent notation outside this magnitude range
EXPONENT_LOWER_BOUND = 1e-6
EXPONENT_UPPER_BOUND = 1e21


@dataclass(frozen=True)
class EdgeSizes:
    """
    Theme values resolved for one edge and its two nodes.

    Attributes:
        from_radius: Source node size plus the spacing margin.
        to_radius: Destination node size plus the spacing margin.
        from_border_width: Source node border width.
        to_border_width: Destination node border width.
        edge_width: Stroke width of the edge.
        color: Stroke color (focus-aware).
        text_color: Label color (focus-aware).
    """

    from_radius: float
    to_radius: float
    from_border_width: float
    to_border_width: float
    edge_width: float
    color: str
    text_color: str


def resolve_sizes(
    edge: Edge, from_node: Node, to_node: Node, theme: GraphTheme, focused: bool
) -> EdgeSizes:
    """Resolve every theme value the builder needs for this edge."""
    color = theme.edge_focus_color if focused else theme.edge_color
    text_color = theme.edge_focus_text_color if focused else theme.edge_text_color
    return EdgeSizes(
        from_radius=theme.node_size.resolve(from_node) + NODE_SPACING_MARGIN,
        to_radius=theme.node_size.resolve(to_node) + NODE_SPACING_MARGIN,
        from_border_width=theme.node_border_width.resolve(from_node),
        to_border_width=theme.node_border_width.resolve(to_node),
        edge_width=theme.edge_width.resolve(edge),
        color=color.resolve(edge),
        text_color=text_color.resolve(edge),
    )


def place_endpoints(
    from_node: Node,
    to_node: Node,
    to_radius: float,
    spacing: float,
    bidirectional: bool,
) -> Tuple[Point, Point]:
    """
    Compute the drawn start and end of a straight edge.

    The start is the source centre; the end (the epicenter) is pulled back
    from the destination centre by ``to_radius`` along the edge direction.
    For a bidirectional pair both points move ``spacing`` to the left of
    the direction of travel, so the reverse edge ends up on the other side.

    Returns:
        (start, end) points
    """
    angle = math.atan2(to_node.y - from_node.y, to_node.x - from_node.x)

    start_x, start_y = from_node.x, from_node.y
    end_x = to_node.x - to_radius * math.cos(angle)
    end_y = to_node.y - to_radius * math.sin(angle)

    if bidirectional:
        dx = math.cos(angle + math.pi / 2) * spacing
        dy = math.sin(angle + math.pi / 2) * spacing
        start_x += dx
        start_y += dy
        end_x += dx
        end_y += dy

    return Point(start_x, start_y), Point(end_x, end_y)


def nodes_overlap(from_node: Node, to_node: Node, sizes: EdgeSizes) -> bool:
    """Check whether the two node footprints (radius plus half border) touch."""
    size_sum = (
        sizes.from_radius
        + sizes.from_border_width / 2
        + sizes.to_radius
        + sizes.to_border_width / 2
    )
    distance_squared = (from_node.x - to_node.x) ** 2 + (from_node.y - to_node.y) ** 2
    return size_sum**2 > distance_squared


def format_weight(weight: float) -> str:
    """
    Render an edge weight as label text.

    Floats follow the usual browser number formatting: integral values drop
    the ``.0``, magnitudes from 1e21 and below 1e-6 use an exponent without
    zero padding, and non-finite values read ``Infinity`` / ``NaN``.
    """
    if not isinstance(weight, float):
        return str(weight)
    if math.isnan(weight):
        return "NaN"
    if math.isinf(weight):
        return "Infinity" if weight > 0 else "-Infinity"
    if weight.is_integer() and abs(weight) < EXPONENT_UPPER_BOUND:
        return str(int(weight))
    if EXPONENT_LOWER_BOUND <= abs(weight) < EXPONENT_UPPER_BOUND:
        return format(Decimal(repr(weight)), "f")

    # Outside the positional range repr always uses an exponent, e.g. 1e-07
    mantissa, _, exponent = repr(weight).partition("e")
    return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"


def build_text_area(
    edge: Edge, theme: GraphTheme, settings: GraphSettings, text_color: str
) -> Optional[TextArea]:
    """Build the weight label of an edge, or None when labels are hidden."""
    if not settings.display_edge_labels:
        return None
    return TextArea(
        color=theme.graph_bg_color.resolve(edge),
        editable=settings.edge_labels_editable,
        text=Text(
            content=format_weight(edge.weight),
            color=text_color,
            font_size=theme.edge_text_size.resolve(edge),
            font_weight=theme.edge_text_font_weight.resolve(edge),
        ),
    )


def self_loop_angle(node: Node, snapshot: GraphSnapshot) -> Tuple[float, List[Point]]:
    """
    Bearing for a self-loop on ``node``, pointing into its widest free sector.

    Returns:
        (angle, distinct neighbour points used)
    """
    points = dedupe_points(snapshot.neighbor_points(node))
    return largest_angular_space(node.position, points), points


def build_schematic(
    edge: Edge,
    snapshot: GraphSnapshot,
    theme: GraphTheme,
    settings: GraphSettings,
    focused_id: Optional[str] = None,
    trace: Optional[SchematicTrace] = None,
) -> Optional[EdgeSchematic]:
    """
    Compute the schematic of one edge against an indexed snapshot.

    Returns:
        The edge schematic, or None when the two nodes overlap.

    Raises:
        NodeNotFoundError: If a label used by the edge (or, for a self-loop,
            by a neighbouring edge) matches no node.
    """
    if trace is not None:
        trace.begin(edge.id)

    from_node, to_node = snapshot.get_from_to_nodes(edge)
    is_self_loop = snapshot.is_self_loop(edge)
    is_bidirectional = not is_self_loop and snapshot.is_bidirectional(edge)
    focused = focused_id is not None and focused_id == edge.id

    if trace is not None:
        trace.add_stage(
            "endpoints",
            {
                "from": from_node,
                "to": to_node,
                "self_loop": is_self_loop,
                "bidirectional": is_bidirectional,
                "focused": focused,
            },
        )

    sizes = resolve_sizes(edge, from_node, to_node, theme, focused)
    spacing = sizes.edge_width * BIDIRECTIONAL_SPACING_FACTOR
    text_area = build_text_area(edge, theme, settings, sizes.text_color)

    if trace is not None:
        trace.add_stage("sizes", {"sizes": sizes, "spacing": spacing})

    if is_self_loop:
        angle, points = self_loop_angle(from_node, snapshot)
        logger.debug(
            "self-loop %s on %s placed at %.3f rad (%d neighbours)",
            edge.id,
            from_node.label,
            angle,
            len(points),
        )
        if trace is not None:
            trace.add_stage("angular_gap", {"points": points, "angle": angle})

        up_distance = sizes.edge_width * UTURN_UP_DISTANCE_FACTOR
        schematic = EdgeSchematic(
            id=edge.id,
            schema_type=SchemaType.UTURN,
            schema=UTurnSchema(
                center=from_node.position,
                spacing=spacing,
                up_distance=up_distance,
                down_distance=up_distance * UTURN_DOWN_DISTANCE_RATIO,
                angle=angle,
                line_width=sizes.edge_width,
                color=sizes.color,
                text_area=text_area,
            ),
        )
        if trace is not None:
            trace.add_stage("schematic", {"schema_type": schematic.schema_type})
        return schematic

    start, end = place_endpoints(
        from_node, to_node, sizes.to_radius, spacing, is_bidirectional
    )
    if trace is not None:
        trace.add_stage("placement", {"start": start, "end": end})

    if nodes_overlap(from_node, to_node, sizes):
        logger.debug(
            "edge %s suppressed: nodes %s and %s overlap",
            edge.id,
            from_node.label,
            to_node.label,
        )
        if trace is not None:
            trace.add_stage("suppressed", {"reason": "nodes_overlap"})
        return None

    if edge.type == EdgeType.UNDIRECTED:
        schematic = EdgeSchematic(
            id=edge.id,
            schema_type=SchemaType.LINE,
            schema=LineSchema(
                start=from_node.position,
                end=to_node.position,
                color=sizes.color,
                width=sizes.edge_width,
                text_area=text_area,
            ),
        )
    else:
        schematic = EdgeSchematic(
            id=edge.id,
            schema_type=SchemaType.ARROW,
            schema=ArrowSchema(
                start=start,
                end=end,
                color=sizes.color,
                width=sizes.edge_width,
                text_offset_from_center=DEFAULT_ARROW_TEXT_OFFSET,
                text_area=text_area,
            ),
        )

    if trace is not None:
        trace.add_stage("schematic", {"schema_type": schematic.schema_type})
    return schematic


def get_edge_schematic(
    edge: Edge,
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    theme: GraphTheme,
    settings: GraphSettings,
    focused_id: Optional[str] = None,
    trace: Optional[SchematicTrace] = None,
) -> Optional[EdgeSchematic]:
    """
    Compute the schematic of a single edge.

    Args:
        edge: The edge to draw.
        nodes: Every node of the graph.
        edges: Every edge of the graph (``edge`` included).
        theme: Visual theme.
        settings: Display settings.
        focused_id: Id of the currently focused element, if any.
        trace: Optional trace recording each pipeline stage.

    Returns:
        The edge schematic, or None when the two nodes overlap.
    """
    snapshot = GraphSnapshot(nodes, edges)
    return build_schematic(edge, snapshot, theme, settings, focused_id, trace)


def build_edge_schematics(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    theme: Optional[GraphTheme] = None,
    settings: Optional[GraphSettings] = None,
    focused_id: Optional[str] = None,
) -> List[EdgeSchematic]:
    """
    Compute the schematics of every drawable edge for one frame.

    The snapshot is indexed once; suppressed edges are left out and the
    remaining schematics keep the order of ``edges``.
    """
    if theme is None:
        theme = GraphTheme()
    if settings is None:
        settings = GraphSettings()

    snapshot = GraphSnapshot(nodes, edges)
    schematics = []
    for edge in snapshot.edges:
        schematic = build_schematic(edge, snapshot, theme, settings, focused_id)
        if schematic is not None:
            schematics.append(schematic)
    return schematics
