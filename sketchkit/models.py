from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """Implicit line ``a*x + b*y = c``."""

    a: float
    b: float
    c: float


@dataclass(frozen=True)
class Polar:
    angle: float
    radius: float


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    r: float


@dataclass(frozen=True)
class QuadSegment:
    """One quadratic curve step: bend towards ``control``, finish at ``end``."""

    control: Point
    end: Point
