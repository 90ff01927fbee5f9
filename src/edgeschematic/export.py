"""
Export functionality for edge schematics.

Converts schematics into the plain, camelCase dictionaries consumed by
rendering layers and saves them as JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .models import (
    ArrowSchema,
    EdgeSchematic,
    LineSchema,
    Point,
    TextArea,
    UTurnSchema,
)


def _point(point: Point) -> Dict[str, float]:
    return {"x": point.x, "y": point.y}


def _text_area(text_area: Optional[TextArea]) -> Optional[Dict[str, Any]]:
    if text_area is None:
        return None
    return {
        "color": text_area.color,
        "editable": text_area.editable,
        "text": {
            "content": text_area.text.content,
            "color": text_area.text.color,
            "fontSize": text_area.text.font_size,
            "fontWeight": text_area.text.font_weight,
        },
    }


def schema_to_dict(schema) -> Dict[str, Any]:
    """Convert a schema variant into a camelCase dictionary."""
    if isinstance(schema, UTurnSchema):
        data = {
            "center": _point(schema.center),
            "spacing": schema.spacing,
            "upDistance": schema.up_distance,
            "downDistance": schema.down_distance,
            "angle": schema.angle,
            "lineWidth": schema.line_width,
            "color": schema.color,
        }
    elif isinstance(schema, ArrowSchema):
        data = {
            "start": _point(schema.start),
            "end": _point(schema.end),
            "color": schema.color,
            "width": schema.width,
            "textOffsetFromCenter": schema.text_offset_from_center,
        }
    elif isinstance(schema, LineSchema):
        data = {
            "start": _point(schema.start),
            "end": _point(schema.end),
            "color": schema.color,
            "width": schema.width,
        }
    else:
        raise TypeError(f"unsupported schema type: {type(schema).__name__}")

    text_area = _text_area(schema.text_area)
    if text_area is not None:
        data["textArea"] = text_area
    return data


def schematic_to_dict(schematic: EdgeSchematic) -> Dict[str, Any]:
    """
    Convert an edge schematic into the dictionary shape renderers expect.

    Example:
        >>> schematic_to_dict(schematic)
        {'id': 'e1', 'graphType': 'edge', 'schemaType': 'arrow', 'schema': {...}}
    """
    return {
        "id": schematic.id,
        "graphType": schematic.graph_type,
        "schemaType": schematic.schema_type.value,
        "schema": schema_to_dict(schematic.schema),
    }


class SchematicExporter:
    """
    Exports edge schematics to JSON files.

    Attributes:
        indent: Indentation used when writing JSON.
    """

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def to_json(self, schematics: Iterable[EdgeSchematic]) -> str:
        """Serialise schematics to a JSON array."""
        return json.dumps(
            [schematic_to_dict(s) for s in schematics], indent=self.indent
        )

    def save_json(self, schematics: Iterable[EdgeSchematic], filename: str) -> None:
        """
        Save schematics to a JSON file.

        Args:
            schematics: The schematics to save.
            filename: Output filename (should end in .json).
        """
        output_path = Path(filename)
        output_path.write_text(self.to_json(schematics), encoding="utf-8")
