"""Single grid position with a mutable life state."""

from __future__ import annotations


class Cell:
    """A cell at a fixed ``(x, y)`` position.

    Coordinates are read-only after creation; ``alive`` may be toggled.
    Two cells are equal when they share a position and state.
    """

    __slots__ = ("_x", "_y", "alive")

    def __init__(self, x: int, y: int, alive: bool = False):
        self._x = x
        self._y = y
        self.alive = bool(alive)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def position(self) -> tuple[int, int]:
        return (self._x, self._y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.position == other.position and self.alive == other.alive

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cell(x={self._x}, y={self._y}, alive={self.alive})"
