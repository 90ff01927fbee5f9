"""
Theme and display settings for edge schematics.

Holds the visual tuning constants used by the schematic builder and the
GraphTheme / GraphSettings configuration objects.
"""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any

from .attributes import Attribute, as_attribute

# =============================================================================
# SCHEMATIC CONFIGURATION - Cosmetic values tuned for the default node size
# =============================================================================

# Visual buffer added to every node radius so edges stop short of the border
NODE_SPACING_MARGIN = 3

# Perpendicular shift of each member of a bidirectional pair, per unit of
# edge width. Also the distance between the two legs of a self-loop.
BIDIRECTIONAL_SPACING_FACTOR = 1.2

# Length of the outgoing leg of a self-loop, per unit of edge width
UTURN_UP_DISTANCE_FACTOR = 8

# Length of the returning leg of a self-loop relative to the outgoing leg
UTURN_DOWN_DISTANCE_RATIO = 0.35

# Distance of an arrow label from the shaft midpoint.
# Approximates the default node size; it does not follow custom node sizes.
DEFAULT_ARROW_TEXT_OFFSET = 32

# Bearing of a self-loop on a node with no other edges (up on a y-down canvas)
DEFAULT_SELF_LOOP_ANGLE = -math.pi / 2

# Tolerance when deciding two neighbour points are the same direction
POINT_EPSILON = 1e-9


def _attr(value: Any):
    return field(default_factory=lambda: as_attribute(value))


@dataclass
class GraphTheme:
    """
    Visual theme consumed by the schematic builder.

    Every field accepts a constant or a function of the entity it styles
    (nodes for ``node_*`` fields, edges for ``edge_*`` fields) and is stored
    as an attribute.

    Attributes:
        node_size: Radius of a node.
        node_border_width: Width of a node's border stroke.
        edge_width: Stroke width of an edge.
        edge_color: Stroke color of an unfocused edge.
        edge_focus_color: Stroke color of the focused edge.
        edge_text_color: Label color of an unfocused edge.
        edge_focus_text_color: Label color of the focused edge.
        edge_text_size: Label font size.
        edge_text_font_weight: Label font weight.
        graph_bg_color: Canvas background, used behind edge labels.
    """

    node_size: Attribute = _attr(35)
    node_border_width: Attribute = _attr(8)
    edge_width: Attribute = _attr(10)
    edge_color: Attribute = _attr("black")
    edge_focus_color: Attribute = _attr("blue")
    edge_text_color: Attribute = _attr("black")
    edge_focus_text_color: Attribute = _attr("blue")
    edge_text_size: Attribute = _attr(20)
    edge_text_font_weight: Attribute = _attr("bold")
    graph_bg_color: Attribute = _attr("white")

    def __post_init__(self):
        for f in fields(self):
            setattr(self, f.name, as_attribute(getattr(self, f.name)))

    def with_overrides(self, **overrides: Any) -> "GraphTheme":
        """
        Return a copy of the theme with some fields replaced.

        Raises:
            ValueError: If an override names a field the theme does not have.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"unknown theme fields: {', '.join(unknown)}")
        return replace(self, **overrides)


@dataclass
class GraphSettings:
    """
    Display settings consumed by the schematic builder.

    Attributes:
        display_edge_labels: Attach a weight label to every edge.
        edge_labels_editable: Mark labels as editable for the host UI.
    """

    display_edge_labels: bool = True
    edge_labels_editable: bool = True
