"""Run a Game of Life session in the terminal.

Examples:
    python examples/run_terminal.py --pattern glider@1,1 --generations 20
    python examples/run_terminal.py --toroidal --width 8 --height 8 --pattern glider@0,0
    python examples/run_terminal.py --config my_session.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure local repo package is used even if another "lifegrid" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifegrid import (  # noqa: E402
    BoundaryPolicy,
    Grid,
    LifeGridError,
    SimulationEngine,
    list_patterns,
    load_config,
    place_pattern,
)


def render(grid: Grid, alive: str = "#", dead: str = ".") -> str:
    return "\n".join(
        "".join(alive if grid.is_alive(x, y) else dead for x in range(grid.width))
        for y in range(grid.height)
    )


class TerminalRenderer:
    """Generation subscriber that prints each new grid."""

    def __init__(self, stream=sys.stdout):
        self._stream = stream

    def on_generation(self, grid: Grid, generation: int) -> None:
        self._stream.write(
            f"\ngeneration {generation} (population {grid.population()})\n"
        )
        self._stream.write(render(grid) + "\n")
        self._stream.flush()


def _parse_placement(value: str) -> tuple[str, int, int]:
    try:
        name, coords = value.split("@", 1)
        x, y = (int(part) for part in coords.split(",", 1))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected NAME@X,Y (e.g. glider@1,1), got {value!r}"
        ) from exc
    return name, x, y


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life in the terminal.")
    parser.add_argument("--config", help="Path to a session YAML file")
    parser.add_argument("--width", type=int, help="Grid width (overrides config)")
    parser.add_argument("--height", type=int, help="Grid height (overrides config)")
    parser.add_argument(
        "--toroidal",
        action="store_true",
        help="Wrap edges instead of treating them as dead",
    )
    parser.add_argument(
        "--pattern",
        action="append",
        type=_parse_placement,
        default=[],
        help=f"Pattern to place, NAME@X,Y (repeatable). Known: {', '.join(list_patterns())}",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=10,
        help="Number of generations to run",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between generations (overrides config)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        cfg = load_config(args.config)
        engine = SimulationEngine.from_config(cfg)
        if args.width is not None or args.height is not None:
            engine.resize(
                args.width if args.width is not None else engine.grid.width,
                args.height if args.height is not None else engine.grid.height,
            )
        if args.toroidal and engine.grid.boundary is not BoundaryPolicy.TOROIDAL:
            engine = SimulationEngine(
                Grid.from_cells(
                    engine.grid.width,
                    engine.grid.height,
                    engine.grid.living_cells(),
                    BoundaryPolicy.TOROIDAL,
                ),
                tick_interval_seconds=engine.tick_interval_seconds,
            )
        if args.interval is not None:
            engine.tick_interval_seconds = args.interval
        for name, x, y in args.pattern:
            place_pattern(engine.grid, name, x, y)
    except (LifeGridError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"generation 0 (population {engine.grid.population()})")
    print(render(engine.grid))

    engine.subscribe(TerminalRenderer())
    engine.start()
    try:
        # The loop stops itself if a subscriber fails.
        while engine.is_running() and not engine.wait_for_generation(
            args.generations, timeout=0.5
        ):
            pass
    except KeyboardInterrupt:
        pass
    finally:
        engine.stop()

    if engine.last_error is not None:
        print(f"error: {engine.last_error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
