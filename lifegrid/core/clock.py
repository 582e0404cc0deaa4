"""Generation clock: counts completed generations and notifies observers."""

from __future__ import annotations

import logging
from typing import List

from overrides import override  # type: ignore

from lifegrid.interfaces.clock import GenerationSubscriber, IClock
from lifegrid.interfaces.grid import IGrid

logger = logging.getLogger(__name__)


class GenerationClock(IClock):
    """Simple pub/sub clock that notifies subscribers on tick()."""

    def __init__(self) -> None:
        self._generation = 0
        self._subscribers: List[GenerationSubscriber] = []

    @property
    @override
    def generation(self) -> int:
        return self._generation

    @property
    def subscribers(self) -> list[GenerationSubscriber]:
        return list(self._subscribers)

    @override
    def subscribe(self, subscriber: GenerationSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    @override
    def unsubscribe(self, subscriber: GenerationSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def _notify_subscriber(self, subscriber: GenerationSubscriber, grid: IGrid) -> None:
        on_generation = getattr(subscriber, "on_generation", None)
        if callable(on_generation):
            on_generation(grid, self._generation)
            return

        # Plain callables are accepted as subscribers too.
        if callable(subscriber):
            subscriber(grid, self._generation)

    @override
    def tick(self, grid: IGrid) -> None:
        self._generation += 1

        # Snapshot so subscribers may unsubscribe themselves mid-notification
        for subscriber in list(self._subscribers):
            try:
                self._notify_subscriber(subscriber, grid)
            except Exception as exc:
                logger.warning(
                    f"Subscriber {subscriber!r} failed on generation "
                    f"{self._generation}: {exc}"
                )
                raise

    @override
    def reset(self) -> None:
        self._generation = 0
