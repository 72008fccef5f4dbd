import math


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/nan on a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def difference(a: float, b: float) -> float:
    return abs(a - b)


def lerp(low: float, high: float, t: float) -> float:
    """Linear interpolation; t outside [0, 1] extrapolates."""
    return low + (high - low) * t


def normalize(value: float, low: float, high: float) -> float:
    """Position of ``value`` within [low, high]; an empty range gives inf or nan."""
    return _divide(value - low, high - low)


def map_range(value: float, src_min: float, src_max: float, dst_min: float, dst_max: float) -> float:
    return lerp(dst_min, dst_max, normalize(value, src_min, src_max))


def wrap(value: float, low: float, high: float) -> float:
    """Wrap into [low, high); Python's floored % keeps negatives in range."""
    span = high - low
    if span == 0:
        return math.nan
    return low + (value - low) % span


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def round_to(value: float, decimals: int) -> float:
    mult = 10 ** decimals
    return _round_half_up(value * mult) / mult


def round_to_nearest(value: float, multiple: float) -> float:
    return _round_half_up(value / multiple) * multiple


def sin_range(angle: float, low: float, high: float) -> float:
    return map_range(math.sin(angle), -1, 1, low, high)


def cos_range(angle: float, low: float, high: float) -> float:
    return map_range(math.cos(angle), -1, 1, low, high)


def lerp_sin(t: float, high: float, low: float) -> float:
    """One full sine cycle as t runs 0..1, starting midway and rising towards ``high``."""
    return sin_range(t * math.pi * 2, low, high)


def equalish(a: float, b: float, delta: float) -> bool:
    return difference(a, b) < delta
