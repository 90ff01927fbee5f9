"""
edgeschematic - Rendering geometry for graph edges

Computes, for every edge of a positioned graph, the shape a renderer should
draw: a straight line, an arrow, or a u-turn for self-loops.

Example:
    >>> from edgeschematic import Edge, Node, build_edge_schematics
    >>> nodes = [Node("1", "A", 0, 0), Node("2", "B", 200, 0)]
    >>> edges = [Edge("e1", "A", "B")]
    >>> [s.schema_type.value for s in build_edge_schematics(nodes, edges)]
    ['arrow']

Debug Mode Example:
    >>> trace = SchematicTrace()
    >>> get_edge_schematic(edges[0], nodes, edges, GraphTheme(), GraphSettings(), trace=trace)
    >>> print(trace.summary())
"""

from .angles import dedupe_points, largest_angular_space, normalize_angle
from .attributes import Constant, Derived, as_attribute, resolve_attribute
from .export import SchematicExporter, schematic_to_dict
from .graph import GraphSnapshot, NodeNotFoundError, SchematicError
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
from .schematic import (
    build_edge_schematics,
    build_schematic,
    get_edge_schematic,
    nodes_overlap,
    place_endpoints,
    resolve_sizes,
)
from .theme import GraphSettings, GraphTheme
from .tracer import SchematicTrace, TraceStage

__version__ = "0.1.0"

__all__ = [
    # Main API
    "get_edge_schematic",
    "build_edge_schematics",
    "build_schematic",
    # Pipeline steps
    "resolve_sizes",
    "place_endpoints",
    "nodes_overlap",
    "largest_angular_space",
    "dedupe_points",
    "normalize_angle",
    # Models
    "Node",
    "Edge",
    "EdgeType",
    "Point",
    "Text",
    "TextArea",
    "LineSchema",
    "ArrowSchema",
    "UTurnSchema",
    "EdgeSchematic",
    "SchemaType",
    # Configuration
    "GraphTheme",
    "GraphSettings",
    "Constant",
    "Derived",
    "as_attribute",
    "resolve_attribute",
    # Graph index
    "GraphSnapshot",
    "SchematicError",
    "NodeNotFoundError",
    # Export
    "SchematicExporter",
    "schematic_to_dict",
    # Debug/Tracing
    "SchematicTrace",
    "TraceStage",
]
