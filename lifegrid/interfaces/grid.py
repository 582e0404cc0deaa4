"""Grid abstraction - the read/write surface shared with collaborators.

Renderers and editors only ever touch cell state through this contract;
the simulation engine consumes it to compute successive generations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from lifegrid.core.cell import Cell


class BoundaryPolicy(Enum):
    """How neighbor coordinates past the edge are resolved."""

    CLAMPED = "clamped"
    """Off-grid neighbors are permanently dead (hard edge)."""

    TOROIDAL = "toroidal"
    """Off-grid neighbors wrap to the opposite edge (discrete torus)."""

    @classmethod
    def parse(cls, value: "BoundaryPolicy | str") -> "BoundaryPolicy":
        """Accept an enum member or its case-insensitive name/value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ValueError(
            f"Unknown boundary policy {value!r}; "
            f"expected one of {[m.value for m in cls]}"
        )


class IGrid(ABC):
    """Fixed-size rectangular field of cells."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def boundary(self) -> BoundaryPolicy:
        """Edge handling used by neighbor queries."""
        ...

    @abstractmethod
    def get(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y) or raise OutOfBoundsError."""
        ...

    @abstractmethod
    def set_alive(self, x: int, y: int, value: bool) -> None:
        """Set the life state of the cell at (x, y)."""
        ...

    @abstractmethod
    def living_neighbor_count(self, x: int, y: int) -> int:
        """Count live cells among the 8 neighbors of (x, y)."""
        ...
