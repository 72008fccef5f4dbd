"""Vertex generators for the shapes a drawing surface strokes or fills.

Each function returns points only; issuing moveTo/lineTo/quadraticCurveTo
calls is left to the caller.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .geometry import SIN_60, distance
from .models import Point, QuadSegment
from .prng import LCG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MultiCurve:
    """Open curve: line start->lead_in, quadratic segments, then line to end."""

    start: Point
    lead_in: Point
    segments: List[QuadSegment]
    end: Point


@dataclass(frozen=True)
class MultiLoop:
    """Closed curve starting and ending at ``start``."""

    start: Point
    segments: List[QuadSegment]


def _midpoint(p0: Point, p1: Point) -> Point:
    return Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)


def polygon_points(x: float, y: float, radius: float, sides: int, rotation: float = 0.0) -> List[Point]:
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, received {sides}")
    step = math.pi * 2 / sides
    return [
        Point(x + math.cos(rotation + step * i) * radius, y + math.sin(rotation + step * i) * radius)
        for i in range(sides)
    ]


def star_points(
    x: float,
    y: float,
    inner: float,
    outer: float,
    points: int,
    rotation: float = 0.0,
) -> List[Point]:
    """Alternating inner/outer vertices, starting on the inner radius."""
    if points < 2:
        raise ValueError(f"A star needs at least 2 points, received {points}")
    step = math.pi / points
    vertices = []
    for i in range(points * 2):
        r = inner if i % 2 == 0 else outer
        angle = rotation + step * i
        vertices.append(Point(x + math.cos(angle) * r, y + math.sin(angle) * r))
    return vertices


def fractal_line(p0: Point, p1: Point, roughness: float, iterations: int, rng: LCG) -> List[Point]:
    """Midpoint displacement between p0 and p1.

    Every pass inserts a jittered midpoint between each neighbouring pair, so
    the result holds ``2**iterations + 1`` points. The jitter starts at 15% of
    the line length and shrinks by ``roughness`` each pass.
    """
    if iterations < 0:
        raise ValueError(f"iterations must not be negative, received {iterations}")
    offset = distance(p0, p1) * 0.15
    path = [p0, p1]
    for _ in range(iterations):
        next_path = []
        for current, following in zip(path, path[1:]):
            mid = _midpoint(current, following)
            next_path.append(current)
            next_path.append(
                Point(
                    mid.x + rng.float_between(-offset, offset),
                    mid.y + rng.float_between(-offset, offset),
                )
            )
        next_path.append(path[-1])
        offset *= roughness
        path = next_path
    logger.debug("fractal line with %d points", len(path))
    return path


def multi_curve(points: Sequence[Point]) -> MultiCurve:
    """Smooth open curve through ``points`` using midpoints as joins."""
    if len(points) < 2:
        raise ValueError("multi_curve needs at least 2 points")
    segments = [
        QuadSegment(control=points[i], end=_midpoint(points[i], points[i + 1]))
        for i in range(1, len(points) - 1)
    ]
    return MultiCurve(
        start=points[0],
        lead_in=_midpoint(points[0], points[1]),
        segments=segments,
        end=points[-1],
    )


def multi_loop(points: Sequence[Point]) -> MultiLoop:
    if len(points) < 3:
        raise ValueError("multi_loop needs at least 3 points")
    first = points[0]
    last = points[-1]
    start = _midpoint(last, first)
    segments = [
        QuadSegment(control=points[i], end=_midpoint(points[i], points[i + 1]))
        for i in range(len(points) - 1)
    ]
    segments.append(QuadSegment(control=last, end=start))
    return MultiLoop(start=start, segments=segments)


def hex_grid_centers(x: float, y: float, w: float, h: float, size: float) -> List[List[Point]]:
    """Rows of hex centres covering the area, with one extra row and column of bleed."""
    if size <= 0:
        raise ValueError(f"Hex size must be positive, received {size}")
    half_width = SIN_60 * size
    x_step = 2 * half_width
    y_step = size * 1.5
    rows = []
    offset = 0.0
    yy = y
    while yy < y + h + y_step:
        row = []
        xx = x
        while xx < x + w + x_step:
            row.append(Point(xx + offset, yy))
            xx += x_step
        rows.append(row)
        offset = half_width if offset == 0 else 0.0
        yy += y_step
    return rows
