"""Command line harness for the sketchkit field sampler."""

import argparse
import json
import logging
import math
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "sample_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from sketchkit import SampleConfig, run_field_sample


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a number, received '{value}'.") from exc
    if not math.isfinite(parsed):
        raise argparse.ArgumentTypeError(f"Expected a finite number, received '{value}'.")
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive number, received '{value}'.")
    return parsed


def _octave_count(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Octaves must be an integer, received '{value}'.") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("Octaves must be at least 1.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sample a deterministic noise field")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=0x5EED1E55,
        help="Scatter seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--width", type=_positive_float, default=400.0, help="Sample area width")
    parser.add_argument("--height", type=_positive_float, default=300.0, help="Sample area height")
    parser.add_argument("--cell", type=_positive_float, default=25.0, help="Grid spacing in pixels")
    parser.add_argument("--scale", type=float, default=0.01, help="Noise frequency per pixel")
    parser.add_argument("--octaves", type=_octave_count, default=4, help="Noise octaves to sum")
    parser.add_argument(
        "--persistence",
        type=_positive_float,
        default=0.5,
        help="Amplitude multiplier applied per octave",
    )
    parser.add_argument("--z", type=float, default=0.0, help="Depth slice through 3D noise")
    parser.add_argument("--scatter", type=int, default=32, help="Number of seeded scatter points")
    parser.add_argument("--hex_size", type=_positive_float, default=15.0, help="Hex lattice cell size")
    parser.add_argument("--verbose", action="store_true", help="Emit debug logging on stderr")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "sample_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = SampleConfig(
        seed=args.seed,
        width=args.width,
        height=args.height,
        cell=args.cell,
        scale=args.scale,
        octaves=args.octaves,
        persistence=args.persistence,
        z=args.z,
        scatter_count=args.scatter,
        hex_size=args.hex_size,
    )
    try:
        result = run_field_sample(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
