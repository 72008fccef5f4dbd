# Deterministic LCG for reproducible sketches (no external deps)
# Constants from Numerical Recipes: a = 1664525, c = 1013904223, m = 2**32
import math
import time
from dataclasses import dataclass, field
from typing import Any, Generic, List, Tuple, TypeVar

from .models import Circle, Point

MULTIPLIER = 1664525
INCREMENT = 1013904223
MODULUS = 1 << 32

T = TypeVar("T")


class EmptyChooserError(RuntimeError):
    """Raised when drawing from a chooser that holds no weight."""


def _clock_seed() -> int:
    return int(time.time() * 1000) & (MODULUS - 1)


def _coerce_seed(value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Seed must be an integer, received {value!r}")
    # Wraps negatives and anything wider than 32 bits.
    return value & (MODULUS - 1)


@dataclass
class LCG:
    state: int = field(default_factory=_clock_seed)

    def __post_init__(self) -> None:
        self.state = _coerce_seed(self.state)

    def seed(self, value: int) -> "LCG":
        """Restart the stream from ``value`` (direct assignment, 32-bit wrap)."""
        self.state = _coerce_seed(value)
        return self

    def next_u32(self) -> int:
        self.state = (self.state * MULTIPLIER + INCREMENT) % MODULUS
        return self.state

    def random(self) -> float:
        return self.next_u32() / MODULUS

    def float_below(self, high: float) -> float:
        return self.random() * high

    def float_between(self, low: float, high: float) -> float:
        return low + self.random() * (high - low)

    def int_below(self, high: float) -> int:
        return math.floor(self.random() * high)

    def int_between(self, low: float, high: float) -> int:
        return math.floor(self.float_between(low, high))

    def chance(self, probability: float = 0.5) -> bool:
        return self.random() < probability

    def point(self, x: float, y: float, w: float, h: float) -> Point:
        px = self.float_between(x, x + w)
        py = self.float_between(y, y + h)
        return Point(px, py)

    def circle(self, x: float, y: float, w: float, h: float, r_min: float, r_max: float) -> Circle:
        cx = self.float_between(x, x + w)
        cy = self.float_between(y, y + h)
        return Circle(cx, cy, self.float_between(r_min, r_max))

    def power(self, low: float, high: float, exponent: float) -> float:
        """Skewed draw: exponent > 1 leans towards ``low``, < 1 towards ``high``."""
        return low + self.random() ** exponent * (high - low)

    def power_int(self, low: float, high: float, exponent: float) -> int:
        return math.floor(self.power(low, high, exponent))

    def average_of(self, low: float, high: float, samples: int) -> float:
        """Mean of ``samples`` uniform draws; bell-shaped as samples grows."""
        if samples < 1:
            raise ValueError(f"samples must be at least 1, received {samples}")
        total = 0.0
        for _ in range(samples):
            total += self.float_between(low, high)
        return total / samples

    def ints(self, count: int, low: float, high: float) -> List[int]:
        return [self.int_between(low, high) for _ in range(count)]

    def floats(self, count: int, low: float, high: float) -> List[float]:
        return [self.float_between(low, high) for _ in range(count)]

    def booleans(self, count: int, probability: float = 0.5) -> List[bool]:
        return [self.chance(probability) for _ in range(count)]

    def points(self, count: int, x: float, y: float, w: float, h: float) -> List[Point]:
        return [self.point(x, y, w, h) for _ in range(count)]

    def chooser(self) -> "WeightedChooser":
        return WeightedChooser(self)


class WeightedChooser(Generic[T]):
    """Weighted pick over items in insertion order."""

    def __init__(self, rng: LCG):
        self.rng = rng
        self.choices: List[Tuple[T, float]] = []
        self.total = 0.0

    def __len__(self) -> int:
        return len(self.choices)

    def add_choice(self, item: T, weight: float = 1.0) -> "WeightedChooser[T]":
        if not weight > 0:
            raise ValueError(f"Choice weight must be positive, received {weight!r}")
        self.choices.append((item, weight))
        self.total += weight
        return self

    def draw(self) -> T:
        if not self.choices:
            raise EmptyChooserError("Cannot draw from an empty chooser")
        r = self.rng.float_between(0.0, self.total)
        cumulative = 0.0
        for item, weight in self.choices:
            cumulative += weight
            if r < cumulative:
                return item
        # Unreachable while total matches the accumulated weights.
        return self.choices[-1][0]


_DEFAULT_RNG = LCG()


def get_default_rng() -> LCG:
    """Shared process-wide stream; prefer a dedicated ``LCG`` in new code."""
    return _DEFAULT_RNG


def set_default_seed(value: int) -> None:
    _DEFAULT_RNG.seed(value)
