"""Clock interface for generation notifications (engine -> observers)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from lifegrid.interfaces.grid import IGrid


class GenerationSubscriber(Protocol):
    """Anything that wants to hear about completed generations."""

    def on_generation(self, grid: IGrid, generation: int) -> None:
        """Receive the freshly computed grid and its generation number."""
        ...


class IClock(ABC):
    """Generation clock used by the simulation engine."""

    @property
    @abstractmethod
    def generation(self) -> int:
        """Total number of generations completed."""
        ...

    @abstractmethod
    def subscribe(self, subscriber: GenerationSubscriber) -> None:
        """Subscribe an observer to generation ticks."""
        ...

    @abstractmethod
    def unsubscribe(self, subscriber: GenerationSubscriber) -> None:
        """Unsubscribe an observer from generation ticks."""
        ...

    @abstractmethod
    def tick(self, grid: IGrid) -> None:
        """Record one completed generation and notify subscribers."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset generation count to zero."""
        ...
