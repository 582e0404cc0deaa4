"""Pattern registry and placement.

Patterns are named sets of live-cell offsets relative to an anchor. The
built-in still lifes, oscillators and spaceships are registered globally
when this module is imported; hosts may register their own.
"""

from __future__ import annotations

import logging
from typing import Iterable

from lifegrid.core.exceptions import OutOfBoundsError, PatternError
from lifegrid.core.grid import Grid

logger = logging.getLogger(__name__)

Pattern = tuple[tuple[int, int], ...]


class PatternRegistry:
    """Registry of named patterns.

    THREAD SAFETY: Not thread-safe. Register patterns during start-up
    before any engine begins running.
    """

    def __init__(self) -> None:
        self._patterns: dict[str, Pattern] = {}

    def register(self, name: str, cells: Iterable[tuple[int, int]]) -> None:
        """Register a pattern under a case-insensitive name."""
        key = name.lower()
        if key in self._patterns:
            raise PatternError(name, f"Pattern '{name}' already registered")
        offsets = tuple(sorted((int(dx), int(dy)) for dx, dy in cells))
        if not offsets:
            raise PatternError(name, f"Pattern '{name}' has no live cells")
        self._patterns[key] = offsets

    def get(self, name: str) -> Pattern:
        """Get a pattern's offsets by name."""
        key = name.lower()
        if key not in self._patterns:
            raise PatternError(
                name,
                f"Unknown pattern '{name}'. Available: {self.list_patterns()}",
            )
        return self._patterns[key]

    def list_patterns(self) -> list[str]:
        """List all registered pattern names."""
        return sorted(self._patterns)


# Global registry
_REGISTRY = PatternRegistry()


def register_pattern(name: str, cells: Iterable[tuple[int, int]]) -> None:
    """Register a pattern globally."""
    _REGISTRY.register(name, cells)


def get_pattern(name: str) -> Pattern:
    return _REGISTRY.get(name)


def list_patterns() -> list[str]:
    return _REGISTRY.list_patterns()


def place_pattern(grid: Grid, name: str, x: int, y: int) -> list[tuple[int, int]]:
    """Stamp pattern ``name`` onto ``grid`` anchored at (x, y).

    Every target cell is validated before any is written, so a pattern
    that does not fit leaves the grid untouched.

    Returns:
        The grid coordinates that were set alive.

    Raises:
        PatternError: unknown pattern name
        OutOfBoundsError: part of the pattern falls outside the grid
    """
    targets = [(x + dx, y + dy) for dx, dy in get_pattern(name)]
    for tx, ty in targets:
        if not grid.contains(tx, ty):
            raise OutOfBoundsError(
                tx, ty, grid.width, grid.height, details={"pattern": name}
            )
    for tx, ty in targets:
        grid.set_alive(tx, ty, True)
    logger.debug(f"Placed pattern '{name}' at ({x}, {y})")
    return targets


_BUILTIN_PATTERNS: dict[str, Pattern] = {
    # Still lifes
    "block": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "beehive": ((1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)),
    # Oscillators (period 2)
    "blinker": ((0, 0), (1, 0), (2, 0)),
    "toad": ((1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)),
    "beacon": ((0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)),
    # Spaceships, y grows downward
    "glider": ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2)),
}

for _name, _cells in _BUILTIN_PATTERNS.items():
    register_pattern(_name, _cells)
