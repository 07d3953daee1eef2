"""A single nesting level of a proof."""

from typing import Dict, Iterator, List, Optional, Tuple

from fitch.core.logic import SubProof
from .step import Step


class Scope:
    """Steps of one proof-box level, keyed by index.

    Insertion order is kept explicitly: the first step of a nested scope is
    its assumption and the last one is what the scope derives.
    """

    def __init__(self, steps=()):
        self._steps: Dict[int, Step] = {}
        for index, step in steps:
            self.insert(index, step)

    @classmethod
    def from_subproof(cls, subproof: SubProof) -> "Scope":
        return cls(subproof.steps)

    def insert(self, index: int, step: Step):
        if index in self._steps:
            raise RuntimeError(f"Step index {index} is already in use")
        self._steps[index] = step

    def remove(self, index: int) -> Step:
        return self._steps.pop(index)

    def get(self, index: int) -> Optional[Step]:
        return self._steps.get(index)

    def first(self) -> Tuple[int, Step]:
        return next(iter(self._steps.items()))

    def last(self) -> Tuple[int, Step]:
        return next(reversed(self._steps.items()))

    def items(self) -> List[Tuple[int, Step]]:
        """Steps in insertion order."""
        return list(self._steps.items())

    def sorted_items(self) -> List[Tuple[int, Step]]:
        """Steps ordered by index, the order a proof is displayed in."""
        return sorted(self._steps.items(), key=lambda item: item[0])

    def to_subproof(self) -> SubProof:
        return SubProof(self._steps.items())

    def __contains__(self, index):
        return index in self._steps

    def __len__(self):
        return len(self._steps)

    def __iter__(self) -> Iterator[Tuple[int, Step]]:
        return iter(self.items())

    def __repr__(self):
        return f"Scope(indices={list(self._steps)})"
