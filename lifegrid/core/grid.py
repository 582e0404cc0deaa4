"""Grid implementation: cell storage and neighbor queries."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from overrides import override  # type: ignore

from lifegrid.core.cell import Cell
from lifegrid.core.exceptions import InvalidConstructionError, OutOfBoundsError
from lifegrid.interfaces.grid import BoundaryPolicy, IGrid
from lifegrid.utils.consts import NEIGHBOR_OFFSETS


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class Grid(IGrid):
    """Rectangular grid of cells with a fixed boundary policy.

    Every coordinate in ``[0, width) x [0, height)`` holds exactly one
    Cell, created dead. Only ``set_alive`` mutates a cell in place; the
    simulation engine replaces the whole grid on each generation.
    """

    def __init__(
        self,
        width: int,
        height: int,
        boundary: Union[BoundaryPolicy, str] = BoundaryPolicy.CLAMPED,
    ):
        _require_int("width", width)
        _require_int("height", height)
        if width <= 0 or height <= 0:
            raise InvalidConstructionError(width, height)

        self._width = width
        self._height = height
        self._boundary = BoundaryPolicy.parse(boundary)
        # Row-major: self._rows[y][x]
        self._rows: list[list[Cell]] = [
            [Cell(x, y, False) for x in range(width)] for y in range(height)
        ]

    @classmethod
    def from_cells(
        cls,
        width: int,
        height: int,
        alive: Iterable[tuple[int, int]],
        boundary: Union[BoundaryPolicy, str] = BoundaryPolicy.CLAMPED,
    ) -> "Grid":
        """Build a grid with the given coordinates alive."""
        grid = cls(width, height, boundary)
        for x, y in alive:
            grid.set_alive(x, y, True)
        return grid

    @property
    @override
    def width(self) -> int:
        return self._width

    @property
    @override
    def height(self) -> int:
        return self._height

    @property
    @override
    def boundary(self) -> BoundaryPolicy:
        return self._boundary

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) lies inside the grid extent."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, x: int, y: int) -> None:
        _require_int("x", x)
        _require_int("y", y)
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)

    @override
    def get(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self._rows[y][x]

    def is_alive(self, x: int, y: int) -> bool:
        return self.get(x, y).alive

    @override
    def set_alive(self, x: int, y: int, value: bool) -> None:
        self._check(x, y)
        self._rows[y][x].alive = bool(value)

    def resolve(self, x: int, y: int) -> Optional[tuple[int, int]]:
        """Map a possibly off-grid coordinate onto the grid.

        Returns None when the boundary policy treats the coordinate as
        permanently dead (clamped edges).
        """
        if self._boundary is BoundaryPolicy.TOROIDAL:
            # Python's % already yields a non-negative result for a positive
            # modulus; each axis wraps against its own extent.
            return (x % self._width, y % self._height)
        if self.contains(x, y):
            return (x, y)
        return None

    @override
    def living_neighbor_count(self, x: int, y: int) -> int:
        self._check(x, y)
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            target = self.resolve(x + dx, y + dy)
            if target is None:
                continue
            tx, ty = target
            if self._rows[ty][tx].alive:
                count += 1
        return count

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, row by row."""
        for row in self._rows:
            yield from row

    def living_cells(self) -> list[tuple[int, int]]:
        """Coordinates of all live cells, sorted by (x, y)."""
        return sorted(cell.position for cell in self.cells() if cell.alive)

    def population(self) -> int:
        return sum(1 for cell in self.cells() if cell.alive)

    def copy(self) -> "Grid":
        """Independent grid with the same dimensions, policy and states."""
        return Grid.from_cells(
            self._width, self._height, self.living_cells(), self._boundary
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._boundary is other._boundary
            and self.living_cells() == other.living_cells()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Grid(width={self._width}, height={self._height}, "
            f"boundary={self._boundary.value}, population={self.population()})"
        )
