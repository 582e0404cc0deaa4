"""Abstract contracts shared between the engine and its collaborators."""

from lifegrid.interfaces.clock import GenerationSubscriber, IClock
from lifegrid.interfaces.grid import BoundaryPolicy, IGrid

__all__ = [
    "BoundaryPolicy",
    "GenerationSubscriber",
    "IClock",
    "IGrid",
]
