"""Constants and default values for the simulation."""


class GridDefaults:
    """Default board geometry and timing."""

    WIDTH = 48
    """Default grid width in cells."""

    HEIGHT = 27
    """Default grid height in cells."""

    TICK_INTERVAL_SECONDS = 0.1
    """Delay between generations while the engine is running."""


# Moore neighborhood: every offset in {-1, 0, 1}^2 except the cell itself.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

# B3/S23
BIRTH_COUNTS = frozenset({3})
SURVIVAL_COUNTS = frozenset({2, 3})
