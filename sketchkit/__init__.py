"""Public package surface for sketchkit: seeded randomness, Perlin noise and 2D geometry."""

from .models import Circle, Line, Point, Polar, QuadSegment
from .noise import noise1, noise2, noise3, octave_noise
from .prng import LCG, EmptyChooserError, WeightedChooser, get_default_rng, set_default_seed
from .sampler import SampleConfig, run_field_sample

__all__ = [
    "Circle",
    "EmptyChooserError",
    "LCG",
    "Line",
    "Point",
    "Polar",
    "QuadSegment",
    "SampleConfig",
    "WeightedChooser",
    "get_default_rng",
    "noise1",
    "noise2",
    "noise3",
    "octave_noise",
    "run_field_sample",
    "set_default_seed",
]
