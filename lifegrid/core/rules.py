"""Conway's Game of Life transition rule."""

from __future__ import annotations

from lifegrid.core.grid import Grid
from lifegrid.utils.consts import BIRTH_COUNTS, SURVIVAL_COUNTS


def next_state(alive: bool, living_neighbors: int) -> bool:
    """Apply B3/S23 to one cell.

    Args:
        alive: Current state of the cell
        living_neighbors: Number of live neighbors (0-8)

    Returns:
        The cell's state in the next generation
    """
    if alive:
        return living_neighbors in SURVIVAL_COUNTS
    return living_neighbors in BIRTH_COUNTS


def advance_generation(grid: Grid) -> Grid:
    """Compute the next generation of ``grid`` into a fresh Grid.

    Every neighbor count is taken from ``grid`` as it was on entry and
    ``grid`` itself is never written, so cells visited later in the pass
    cannot observe updates made earlier in the same pass.
    """
    born = [
        cell.position
        for cell in grid.cells()
        if next_state(cell.alive, grid.living_neighbor_count(cell.x, cell.y))
    ]
    return Grid.from_cells(grid.width, grid.height, born, grid.boundary)
