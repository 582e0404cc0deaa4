"""Simulation engine: generation stepping and the run/stop lifecycle."""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, Union

from lifegrid.core.clock import GenerationClock
from lifegrid.core.exceptions import InvalidStateError
from lifegrid.core.grid import Grid
from lifegrid.core.patterns import place_pattern
from lifegrid.core.rules import advance_generation
from lifegrid.interfaces.clock import GenerationSubscriber, IClock
from lifegrid.interfaces.grid import BoundaryPolicy
from lifegrid.utils.consts import GridDefaults

if TYPE_CHECKING:
    from lifegrid.utils.config_loader import SessionConfig

logger = logging.getLogger(__name__)

EditPermissionListener = Callable[[bool], None]


class EngineState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class SimulationEngine:
    """Owns a Grid and advances it one generation per tick.

    While stopped, collaborators may edit the grid (``editing_allowed`` is
    True). ``start()`` hands the grid to a background tick loop that
    replaces it with a freshly computed generation every
    ``tick_interval_seconds``; ``stop()`` hands it back.

    THREAD SAFETY: every generation advance and grid swap happens under
    ``lock``. Editors that write while the loop may be active must hold
    the same lock (see GridEditor). Never call ``stop()`` while holding
    ``lock`` from a thread other than the tick loop: ``stop()`` joins the
    loop, which needs ``lock`` to finish its generation.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        *,
        width: int = GridDefaults.WIDTH,
        height: int = GridDefaults.HEIGHT,
        boundary: Union[BoundaryPolicy, str] = BoundaryPolicy.CLAMPED,
        tick_interval_seconds: float = GridDefaults.TICK_INTERVAL_SECONDS,
        clock: Optional[IClock] = None,
    ):
        self._grid = grid if grid is not None else Grid(width, height, boundary)
        self._clock = clock if clock is not None else GenerationClock()
        self._tick_interval = self._validate_interval(tick_interval_seconds)

        self._lock = threading.RLock()
        self._state_lock = threading.RLock()
        self._generation_cond = threading.Condition()
        self._state = EngineState.STOPPED
        # Stays False until stop() has joined the loop, not just flagged it.
        self._editing_allowed = True
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._last_error: Optional[BaseException] = None
        self._edit_listeners: List[EditPermissionListener] = []

    @classmethod
    def from_config(cls, config: "SessionConfig") -> "SimulationEngine":
        """Build an engine (and seeded grid) from a loaded session config."""
        grid = Grid(config.grid.width, config.grid.height, config.grid.boundary)
        for placement in config.seed:
            place_pattern(grid, placement.name, placement.x, placement.y)
        return cls(
            grid,
            tick_interval_seconds=config.simulation.tick_interval_seconds,
        )

    # Properties ----------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def generation(self) -> int:
        return self._clock.generation

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def editing_allowed(self) -> bool:
        return self._editing_allowed

    @property
    def last_error(self) -> Optional[BaseException]:
        """Exception that terminated the most recent run loop, if any."""
        return self._last_error

    @property
    def tick_interval_seconds(self) -> float:
        return self._tick_interval

    @tick_interval_seconds.setter
    def tick_interval_seconds(self, value: float) -> None:
        self._tick_interval = self._validate_interval(value)

    @staticmethod
    def _validate_interval(value: float) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"tick interval must be a number, got {value!r}")
        if value < 0:
            raise ValueError("tick interval must be >= 0")
        return float(value)

    def is_running(self) -> bool:
        return self._state is EngineState.RUNNING

    # Observers -----------------------------------------------------------

    def subscribe(self, subscriber: GenerationSubscriber) -> None:
        """Register a per-generation observer (e.g. a renderer)."""
        self._clock.subscribe(subscriber)

    def unsubscribe(self, subscriber: GenerationSubscriber) -> None:
        self._clock.unsubscribe(subscriber)

    def add_edit_permission_listener(self, listener: EditPermissionListener) -> None:
        if listener not in self._edit_listeners:
            self._edit_listeners.append(listener)

    def remove_edit_permission_listener(self, listener: EditPermissionListener) -> None:
        if listener in self._edit_listeners:
            self._edit_listeners.remove(listener)

    def _notify_edit_permission(self, allowed: bool) -> None:
        for listener in list(self._edit_listeners):
            listener(allowed)

    # Lifecycle -----------------------------------------------------------

    def start(self) -> None:
        """Begin the tick loop. No-op if already running."""
        with self._state_lock:
            if self._state is EngineState.RUNNING:
                return
            self._state = EngineState.RUNNING
            self._last_error = None
            self._editing_allowed = False
            self._notify_edit_permission(False)

            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._run_loop,
                args=(stop_event,),
                name="lifegrid-tick",
                daemon=True,
            )
            logger.debug(
                f"Simulation started at generation {self.generation} "
                f"(interval={self._tick_interval}s)"
            )
            self._thread.start()

    def stop(self) -> None:
        """Halt the tick loop. No-op if already stopped.

        A generation already in progress runs to completion; no further
        generation begins once this returns, and ``editing_allowed`` only
        turns True after that. Must not be called while holding ``lock``
        outside the tick loop.
        """
        with self._state_lock:
            if self._state is EngineState.STOPPED:
                return
            self._state = EngineState.STOPPED
            self._stop_event.set()
            thread, self._thread = self._thread, None

        # An observer may call stop() from inside the loop thread itself.
        if thread is not None and thread is not threading.current_thread():
            thread.join()

        with self._state_lock:
            # start() may have run again while we were joining.
            if self._state is not EngineState.STOPPED:
                return
            self._editing_allowed = True
        logger.debug(f"Simulation stopped at generation {self.generation}")
        self._notify_edit_permission(True)

    def _run_loop(self, stop_event: threading.Event) -> None:
        while True:
            if self._tick_interval > 0:
                if stop_event.wait(self._tick_interval):
                    break
            else:
                # Still yield once per tick so stop() can get in.
                time.sleep(0)
                if stop_event.is_set():
                    break
            try:
                self._advance()
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.error(f"Run loop stopped at generation {self.generation}: {exc}")
                with self._state_lock:
                    # A newer loop may already own the engine after stop()/start().
                    if self._stop_event is not stop_event:
                        break
                    self._last_error = exc
                self.stop()
                break

    def _advance(self) -> Grid:
        with self._lock:
            new_grid = advance_generation(self._grid)
            self._grid = new_grid
            self._clock.tick(new_grid)
        with self._generation_cond:
            self._generation_cond.notify_all()
        return new_grid

    def step(self) -> Grid:
        """Advance exactly one generation regardless of run state."""
        return self._advance()

    def wait_for_generation(self, generation: int, timeout: Optional[float] = None) -> bool:
        """Block until at least ``generation`` generations have completed.

        Returns False if the timeout expired first.
        """
        with self._generation_cond:
            return self._generation_cond.wait_for(
                lambda: self.generation >= generation, timeout=timeout
            )

    # Grid management (stopped only) --------------------------------------

    def _require_stopped(self, operation: str) -> None:
        if self._state is not EngineState.STOPPED or not self._editing_allowed:
            raise InvalidStateError(operation, EngineState.RUNNING.value)

    def resize(self, width: int, height: int) -> Grid:
        """Replace the grid with one of a new size, keeping the overlap."""
        with self._state_lock:
            self._require_stopped("resize the grid")
            with self._lock:
                old = self._grid
                resized = Grid(width, height, old.boundary)
                for x, y in old.living_cells():
                    if resized.contains(x, y):
                        resized.set_alive(x, y, True)
                self._grid = resized
        logger.debug(f"Grid resized from {old.width}x{old.height} to {width}x{height}")
        return resized

    def reset(self) -> None:
        """Kill every cell and restart the generation count."""
        with self._state_lock:
            self._require_stopped("reset the grid")
            with self._lock:
                grid = self._grid
                self._grid = Grid(grid.width, grid.height, grid.boundary)
                self._clock.reset()
