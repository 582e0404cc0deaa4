"""Permission-aware grid editing for input collaborators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lifegrid.core.simulation_engine import SimulationEngine

logger = logging.getLogger(__name__)


class GridEditor:
    """Adapter that applies pointer edits to an engine's grid.

    Edits are silently ignored (the methods return False) while the
    simulation is running, while a UI overlay has the pointer, or when the
    target lies outside the grid.
    """

    def __init__(self, engine: "SimulationEngine"):
        self._engine = engine
        self._overlay_active = False

    @property
    def overlay_active(self) -> bool:
        return self._overlay_active

    def set_overlay_active(self, active: bool) -> None:
        """Block edits while the pointer is over a menu or control."""
        self._overlay_active = bool(active)

    @property
    def can_edit(self) -> bool:
        return self._engine.editing_allowed and not self._overlay_active

    def paint(self, x: int, y: int) -> bool:
        """Bring the cell at (x, y) to life."""
        return self._apply(x, y, lambda alive: True)

    def erase(self, x: int, y: int) -> bool:
        """Kill the cell at (x, y)."""
        return self._apply(x, y, lambda alive: False)

    def toggle(self, x: int, y: int) -> bool:
        return self._apply(x, y, lambda alive: not alive)

    def _apply(self, x: int, y: int, update) -> bool:
        if not self.can_edit:
            return False
        with self._engine.lock:
            # start() may have run since the first check.
            if not self._engine.editing_allowed:
                return False
            grid = self._engine.grid
            if not grid.contains(x, y):
                logger.debug(f"Ignoring edit outside grid at ({x}, {y})")
                return False
            current = grid.is_alive(x, y)
            wanted = update(current)
            if wanted == current:
                return False
            grid.set_alive(x, y, wanted)
        return True
