import pytest

from lifegrid.core.clock import GenerationClock
from lifegrid.core.grid import Grid


class Subscriber:
    def __init__(self):
        self.calls = []

    def on_generation(self, grid, generation):
        self.calls.append((grid, generation))


def test_clock_subscribe_unsubscribe_and_tick():
    clock = GenerationClock()
    sub = Subscriber()
    grid = Grid(2, 2)

    clock.subscribe(sub)
    clock.subscribe(sub)  # should not duplicate
    clock.tick(grid)

    assert clock.generation == 1
    assert sub.calls == [(grid, 1)]

    clock.unsubscribe(sub)
    clock.tick(grid)
    assert clock.generation == 2
    assert len(sub.calls) == 1  # no new calls after unsubscribe


def test_clock_accepts_plain_callables():
    clock = GenerationClock()
    seen = []
    clock.subscribe(lambda grid, generation: seen.append(generation))

    clock.tick(Grid(1, 1))
    clock.tick(Grid(1, 1))
    assert seen == [1, 2]


def test_clock_subscriber_may_unsubscribe_itself():
    clock = GenerationClock()
    other = Subscriber()

    class OneShot:
        calls = 0

        def on_generation(self, grid, generation):
            OneShot.calls += 1
            clock.unsubscribe(self)

    clock.subscribe(OneShot())
    clock.subscribe(other)
    clock.tick(Grid(1, 1))
    clock.tick(Grid(1, 1))

    assert OneShot.calls == 1
    assert len(other.calls) == 2


def test_clock_propagates_subscriber_errors():
    clock = GenerationClock()

    def broken(grid, generation):
        raise RuntimeError("draw failed")

    clock.subscribe(broken)
    with pytest.raises(RuntimeError):
        clock.tick(Grid(1, 1))
    assert clock.generation == 1


def test_clock_reset():
    clock = GenerationClock()
    clock.tick(Grid(1, 1))
    clock.reset()
    assert clock.generation == 0


def test_unsubscribe_unknown_is_noop():
    clock = GenerationClock()
    clock.unsubscribe(Subscriber())
    assert clock.subscribers == []
