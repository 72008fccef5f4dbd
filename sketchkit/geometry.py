"""2D geometry helpers over plain ``Point`` values.

Degenerate input (parallel lines, collinear triangles, points inside a circle)
returns ``None``; zero-length vectors give ``nan`` angles. Nothing here raises
for numeric input.
"""

import math
from typing import Optional

from .models import Line, Point, Polar
from .num import lerp

SIN_60 = math.sin(math.pi / 3)


def distance_xy(x0: float, y0: float, x1: float, y1: float) -> float:
    dx = x1 - x0
    dy = y1 - y0
    return math.sqrt(dx * dx + dy * dy)


def distance(p0: Point, p1: Point) -> float:
    return distance_xy(p0.x, p0.y, p1.x, p1.y)


def magnitude(p: Point) -> float:
    return distance_xy(0.0, 0.0, p.x, p.y)


def dot_product(p0: Point, p1: Point, p2: Point, p3: Point) -> float:
    """Dot product of the direction vectors p0->p1 and p2->p3."""
    return (p1.x - p0.x) * (p3.x - p2.x) + (p1.y - p0.y) * (p3.y - p2.y)


def angle_between(p0: Point, p1: Point, p2: Point, p3: Point) -> float:
    """Unsigned angle in radians between p0->p1 and p2->p3."""
    mag0 = distance(p0, p1)
    mag1 = distance(p2, p3)
    if mag0 == 0 or mag1 == 0:
        return math.nan
    cosine = dot_product(p0, p1, p2, p3) / mag0 / mag1
    return math.acos(max(-1.0, min(1.0, cosine)))


def polar_to_point(angle: float, radius: float) -> Point:
    return Point(math.cos(angle) * radius, math.sin(angle) * radius)


def point_to_polar(p: Point) -> Polar:
    return Polar(math.atan2(p.y, p.x), magnitude(p))


def lerp_point(p0: Point, p1: Point, t: float) -> Point:
    return Point(lerp(p0.x, p1.x, t), lerp(p0.y, p1.y, t))


def bezier_cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    s = 1 - t
    m0 = s * s * s
    m1 = 3 * s * s * t
    m2 = 3 * s * t * t
    m3 = t * t * t
    return Point(
        m0 * p0.x + m1 * p1.x + m2 * p2.x + m3 * p3.x,
        m0 * p0.y + m1 * p1.y + m2 * p2.y + m3 * p3.y,
    )


def bezier_quadratic(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    s = 1 - t
    m0 = s * s
    m1 = 2 * s * t
    m2 = t * t
    return Point(
        m0 * p0.x + m1 * p1.x + m2 * p2.x,
        m0 * p0.y + m1 * p1.y + m2 * p2.y,
    )


def point_in_circle(px: float, py: float, cx: float, cy: float, cr: float) -> bool:
    return distance_xy(px, py, cx, cy) <= cr


def point_in_rect(px: float, py: float, rx: float, ry: float, rw: float, rh: float) -> bool:
    return rx <= px <= rx + rw and ry <= py <= ry + rh


def line_through(p0: Point, p1: Point) -> Line:
    a = p1.y - p0.y
    b = p0.x - p1.x
    return Line(a, b, a * p0.x + b * p0.y)


def _solve(l0: Line, l1: Line) -> Optional[Point]:
    # Exact zero test: nearly parallel lines still intersect, far away.
    det = l0.a * l1.b - l1.a * l0.b
    if det == 0:
        return None
    return Point(
        (l1.b * l0.c - l0.b * l1.c) / det,
        (l0.a * l1.c - l1.a * l0.c) / det,
    )


def line_intersect(p0: Point, p1: Point, p2: Point, p3: Point) -> Optional[Point]:
    """Intersection of the infinite lines p0-p1 and p2-p3, or None if parallel."""
    return _solve(line_through(p0, p1), line_through(p2, p3))


def _ratio(value: float, start: float, end: float) -> float:
    span = end - start
    if span == 0:
        return math.nan
    return (value - start) / span


def _within_segment(hit: Point, start: Point, end: Point) -> bool:
    rx = _ratio(hit.x, start.x, end.x)
    ry = _ratio(hit.y, start.y, end.y)
    return 0 <= rx <= 1 or 0 <= ry <= 1


def segment_intersect(p0: Point, p1: Point, p2: Point, p3: Point) -> Optional[Point]:
    """Intersection of segments p0-p1 and p2-p3.

    A hit is accepted when, for each segment, its x or its y parameter falls
    in [0, 1]. This per-axis check is looser than a true bounds test and can
    accept hits past the end of a segment that is close to axis-aligned.
    """
    hit = line_intersect(p0, p1, p2, p3)
    if hit is None:
        return None
    if _within_segment(hit, p0, p1) and _within_segment(hit, p2, p3):
        return hit
    return None


def _bisector(p0: Point, p1: Point) -> Line:
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    mx = (p0.x + p1.x) / 2
    my = (p0.y + p1.y) / 2
    return Line(dx, dy, dx * mx + dy * my)


def circum_center(p0: Point, p1: Point, p2: Point) -> Optional[Point]:
    """Meeting point of the perpendicular bisectors; None for collinear points."""
    return _solve(_bisector(p0, p1), _bisector(p1, p2))


def centroid(p0: Point, p1: Point, p2: Point) -> Point:
    return Point((p0.x + p1.x + p2.x) / 3, (p0.y + p1.y + p2.y) / 3)


def ortho_center(p0: Point, p1: Point, p2: Point) -> Optional[Point]:
    """Orthocenter from the Euler line: H = 3G - 2O."""
    circum = circum_center(p0, p1, p2)
    if circum is None:
        return None
    center = centroid(p0, p1, p2)
    return Point(3 * center.x - 2 * circum.x, 3 * center.y - 2 * circum.y)


def hex_lattice_point(col: int, row: int, size: float, x_major: bool = True) -> Point:
    """Centre of hex (col, row) in a staggered grid; odd rows shift half a hex."""
    half_width = SIN_60 * size
    offset = (row % 2) * half_width
    major = col * 2 * half_width + offset
    minor = row * size * 1.5
    if x_major:
        return Point(major, minor)
    return Point(minor, major)


def tangent_point_on_circle(
    x: float,
    y: float,
    cx: float,
    cy: float,
    cr: float,
    counter_clockwise: bool = False,
) -> Optional[Point]:
    dist = distance_xy(x, y, cx, cy)
    if dist < cr or dist == 0:
        return None
    direction = 1 if counter_clockwise else -1
    angle = math.acos(-cr / dist) * direction
    base_angle = math.atan2(cy - y, cx - x)
    total = base_angle + angle
    return Point(cx + math.cos(total) * cr, cy + math.sin(total) * cr)
