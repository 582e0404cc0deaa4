"""Core modules for the simulation.

- cell: a single grid position
- grid: cell storage and neighbor queries under a boundary policy
- rules: B3/S23 transition and whole-grid generation advance
- clock: generation counter with pub/sub notifications
- simulation_engine: run/stop lifecycle and the tick loop
- editor: permission-aware editing for input collaborators
- patterns: pattern registry and placement
"""

from lifegrid.core.cell import Cell
from lifegrid.core.clock import GenerationClock
from lifegrid.core.editor import GridEditor
from lifegrid.core.exceptions import (
    ConfigurationError,
    InvalidConstructionError,
    InvalidStateError,
    LifeGridError,
    OutOfBoundsError,
    PatternError,
)
from lifegrid.core.grid import Grid
from lifegrid.core.patterns import (
    PatternRegistry,
    get_pattern,
    list_patterns,
    place_pattern,
    register_pattern,
)
from lifegrid.core.rules import advance_generation, next_state
from lifegrid.core.simulation_engine import EngineState, SimulationEngine

__all__ = [
    # Data model
    "Cell",
    "Grid",
    # Rules
    "advance_generation",
    "next_state",
    # Engine
    "EngineState",
    "GenerationClock",
    "SimulationEngine",
    "GridEditor",
    # Patterns
    "PatternRegistry",
    "get_pattern",
    "list_patterns",
    "place_pattern",
    "register_pattern",
    # Errors
    "LifeGridError",
    "ConfigurationError",
    "InvalidConstructionError",
    "InvalidStateError",
    "OutOfBoundsError",
    "PatternError",
]
