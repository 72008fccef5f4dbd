"""Deterministic field sampler: noise grid, seeded scatter and shaded hex lattice."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from .geometry import hex_lattice_point, point_in_rect
from .noise import octave_noise
from .num import clamp, map_range
from .prng import LCG

logger = logging.getLogger(__name__)


@dataclass
class SampleConfig:
    """Configuration for one sampling pass."""

    seed: int = 0x5EED1E55
    width: float = 400.0
    height: float = 300.0
    cell: float = 25.0  # grid spacing in pixels
    scale: float = 0.01  # noise frequency per pixel
    octaves: int = 4
    persistence: float = 0.5
    z: float = 0.0
    scatter_count: int = 32
    hex_size: float = 15.0


def _validate(cfg: SampleConfig) -> None:
    if cfg.width <= 0 or cfg.height <= 0:
        raise ValueError(f"Sample area must be positive, received {cfg.width}x{cfg.height}")
    if cfg.cell <= 0:
        raise ValueError(f"cell must be positive, received {cfg.cell}")
    if cfg.hex_size <= 0:
        raise ValueError(f"hex_size must be positive, received {cfg.hex_size}")
    if not cfg.persistence > 0:
        raise ValueError(f"persistence must be positive, received {cfg.persistence}")
    if cfg.octaves < 1:
        raise ValueError(f"octaves must be at least 1, received {cfg.octaves}")
    if cfg.scatter_count < 0:
        raise ValueError(f"scatter_count must not be negative, received {cfg.scatter_count}")


def _field(cfg: SampleConfig, x: float, y: float) -> float:
    return octave_noise(x * cfg.scale, y * cfg.scale, cfg.z, cfg.octaves, cfg.persistence)


def run_field_sample(cfg: SampleConfig) -> Dict[str, Any]:
    """Sample the configured field, fully driven by ``cfg.seed``."""

    _validate(cfg)
    rng = LCG(cfg.seed)
    logger.info("sampling %sx%s field, seed=%#x", cfg.width, cfg.height, cfg.seed)

    columns = int(cfg.width // cfg.cell)
    rows = int(cfg.height // cfg.cell)
    half = cfg.cell / 2
    grid: List[List[float]] = []
    for row in range(rows):
        values = [
            round(_field(cfg, col * cfg.cell + half, row * cfg.cell + half), 4)
            for col in range(columns)
        ]
        grid.append(values)
        logger.debug("row %d: %d samples", row, len(values))

    scatter = []
    for p in rng.points(cfg.scatter_count, 0.0, 0.0, cfg.width, cfg.height):
        scatter.append({
            "x": round(p.x, 3),
            "y": round(p.y, 3),
            "value": round(_field(cfg, p.x, p.y), 4),
        })

    hexes = []
    col = 0
    while True:
        if hex_lattice_point(col, 0, cfg.hex_size).x > cfg.width:
            break
        row = 0
        while True:
            centre = hex_lattice_point(col, row, cfg.hex_size)
            if centre.y > cfg.height:
                break
            if point_in_rect(centre.x, centre.y, 0.0, 0.0, cfg.width, cfg.height):
                # Map the roughly [-1, 1] noise into a [0, 1] shade.
                shade = clamp(map_range(_field(cfg, centre.x, centre.y), -1, 1, 0, 1), 0.0, 1.0)
                hexes.append({
                    "col": col,
                    "row": row,
                    "x": round(centre.x, 3),
                    "y": round(centre.y, 3),
                    "shade": round(shade, 4),
                })
            row += 1
        col += 1

    flat = [value for values in grid for value in values]
    summary = {
        "samples": len(flat),
        "min": min(flat) if flat else None,
        "max": max(flat) if flat else None,
        "mean": round(sum(flat) / len(flat), 4) if flat else None,
        "scatter": len(scatter),
        "hexes": len(hexes),
    }
    logger.info("sampled %d grid values, %d hexes", summary["samples"], summary["hexes"])

    return {
        "config": asdict(cfg),
        "summary": summary,
        "grid": grid,
        "scatter": scatter,
        "hex": hexes,
    }


if __name__ == "__main__":
    import json

    result = run_field_sample(SampleConfig())
    print(json.dumps(result, indent=2))
