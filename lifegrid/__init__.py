"""Conway's Game of Life simulation engine.

Architecture:
- Grid: fixed-size field of cells with clamped or toroidal edges
- advance_generation: pure double-buffered B3/S23 step
- SimulationEngine: start/stop/step lifecycle, tick loop, observers
- Presentation and input are external; they read the grid, subscribe to
  generations, and edit through GridEditor while the engine is stopped

Getting started:
    from lifegrid import SimulationEngine, place_pattern

    engine = SimulationEngine(width=10, height=10)
    place_pattern(engine.grid, "glider", 1, 1)
    engine.step()
"""

from lifegrid.core import (
    Cell,
    ConfigurationError,
    EngineState,
    GenerationClock,
    Grid,
    GridEditor,
    InvalidConstructionError,
    InvalidStateError,
    LifeGridError,
    OutOfBoundsError,
    PatternError,
    SimulationEngine,
    advance_generation,
    list_patterns,
    next_state,
    place_pattern,
    register_pattern,
)
from lifegrid.interfaces.grid import BoundaryPolicy
from lifegrid.utils.config_loader import SessionConfig, get_config, load_config

__all__ = [
    "BoundaryPolicy",
    "Cell",
    "Grid",
    "advance_generation",
    "next_state",
    "EngineState",
    "GenerationClock",
    "SimulationEngine",
    "GridEditor",
    "list_patterns",
    "place_pattern",
    "register_pattern",
    "SessionConfig",
    "get_config",
    "load_config",
    "LifeGridError",
    "ConfigurationError",
    "InvalidConstructionError",
    "InvalidStateError",
    "OutOfBoundsError",
    "PatternError",
]
