"""
Debug tracing for edge schematic computation.

When a SchematicTrace is passed to the builder, every pipeline stage records
the values it computed. This is primarily useful for:
1. Understanding why an edge was suppressed or drawn a certain way
2. Writing targeted tests against intermediate geometry

Usage:
    >>> trace = SchematicTrace()
    >>> schematic = get_edge_schematic(edge, nodes, edges, theme, settings, trace=trace)
    >>> print(trace.summary())
    >>> trace.dump_to_file("edge_trace.txt")

Stages recorded, in order:
- endpoints: resolved source/destination nodes, self-loop and reverse-edge flags
- sizes: effective radii, border widths, edge width and colors
- placement: start/end points of straight edges
- angular_gap: neighbour points and chosen bearing of a self-loop
- suppressed: present only when the nodes overlap
- schematic: the schema variant returned
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TraceStage:
    """
    Snapshot of the values computed by one pipeline stage.

    Attributes:
        name: Name of the stage
        data: Dictionary of values computed at this stage
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class SchematicTrace:
    """
    Complete trace of one or more schematic computations.

    Attributes:
        stages: Recorded stages, in the order they ran
        edge_ids: Ids of the edges traced, in order
    """

    stages: List[TraceStage] = field(default_factory=list)
    edge_ids: List[str] = field(default_factory=list)

    def begin(self, edge_id: str) -> None:
        """Mark the start of the computation for an edge."""
        self.edge_ids.append(edge_id)

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """Record a stage with a copy of its data."""
        self.stages.append(TraceStage(name, data.copy()))

    def get_stage(self, name: str) -> Optional[TraceStage]:
        """Get the most recent stage with the given name."""
        for stage in reversed(self.stages):
            if stage.name == name:
                return stage
        return None

    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def was_suppressed(self) -> bool:
        return self.get_stage("suppressed") is not None

    def summary(self) -> str:
        """Generate a short human-readable summary of the trace."""
        lines = [
            "=" * 60,
            "SCHEMATIC TRACE SUMMARY",
            "=" * 60,
            "",
            f"Edges traced: {', '.join(self.edge_ids) or '-'}",
            f"Stages: {len(self.stages)}",
        ]
        for stage in self.stages:
            lines.append(f"  {stage.name}")
        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete dump of every stage and its data."""
        lines = [self.summary(), "", "STAGES:", "-" * 40]
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")
        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
