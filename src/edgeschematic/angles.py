"""
Angular placement helpers.

Used to orient self-loops away from the other edges attached to a node.
"""

import math
from typing import Iterable, List

from .models import Point
from .theme import DEFAULT_SELF_LOOP_ANGLE, POINT_EPSILON


def normalize_angle(angle: float) -> float:
    """Map an angle in radians into the range (-pi, pi]."""
    angle = math.fmod(angle, 2 * math.pi)
    if angle <= -math.pi:
        angle += 2 * math.pi
    elif angle > math.pi:
        angle -= 2 * math.pi
    return angle


def bearing(origin: Point, point: Point) -> float:
    """Bearing of ``point`` as seen from ``origin``, in radians."""
    return math.atan2(point.y - origin.y, point.x - origin.x)


def dedupe_points(points: Iterable[Point], epsilon: float = POINT_EPSILON) -> List[Point]:
    """
    Remove points that coincide with an earlier point.

    Two edges to the same neighbour (such as a bidirectional pair) produce the
    same point and must only count once. Order of first appearance is kept.
    """
    unique: List[Point] = []
    for point in points:
        if any(
            math.isclose(point.x, seen.x, abs_tol=epsilon)
            and math.isclose(point.y, seen.y, abs_tol=epsilon)
            for seen in unique
        ):
            continue
        unique.append(point)
    return unique


def largest_angular_space(
    origin: Point,
    points: Iterable[Point],
    default: float = DEFAULT_SELF_LOOP_ANGLE,
) -> float:
    """
    Find the bearing that bisects the widest free sector around ``origin``.

    The bearings from ``origin`` to every point split the full turn into
    sectors; the middle of the widest one is the direction furthest, in
    angle, from every point. With a single point that is the opposite
    direction. When several sectors are equally wide, the one starting at
    the smallest bearing wins.

    Args:
        origin: The centre to measure bearings from.
        points: Positions of the neighbours to keep away from.
        default: Bearing returned when there are no points.

    Returns:
        A bearing in radians within (-pi, pi].
    """
    angles = sorted(
        bearing(origin, p)
        for p in points
        if not (
            math.isclose(p.x, origin.x, abs_tol=POINT_EPSILON)
            and math.isclose(p.y, origin.y, abs_tol=POINT_EPSILON)
        )
    )
    if not angles:
        return default

    best_start = angles[0]
    best_gap = -1.0
    for i, start in enumerate(angles):
        if i + 1 < len(angles):
            gap = angles[i + 1] - start
        else:
            # Wrap around from the last bearing back to the first
            gap = angles[0] + 2 * math.pi - start
        if gap > best_gap + POINT_EPSILON:
            best_gap = gap
            best_start = start

    return normalize_angle(best_start + best_gap / 2)
