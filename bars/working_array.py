"""
working_array.py — The Array Being Sorted
===========================================
A WorkingArray is the ordered sequence of positive integers that one
visualizer panel animates.  Its length is fixed when it is created;
after that only element order and values at known indices change.

Only the SortDriver mutates it (swap / item assignment), on behalf of
whichever algorithm is currently running.
"""

import random
from typing import Any, Dict, Iterator, List, Optional


ARRAY_LENGTH = 10
VALUE_MIN    = 1
VALUE_MAX    = 100


class WorkingArray:
    """
    Attributes:
        values : The live list of integers.  Do not replace it, mutate it.
    """

    __slots__ = ("values",)

    def __init__(self, values: Optional[List[int]] = None):
        self.values: List[int] = list(values or [])

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------
    @classmethod
    def generate(
        cls,
        length: int = ARRAY_LENGTH,
        rng: Optional[random.Random] = None,
        low: int = VALUE_MIN,
        high: int = VALUE_MAX,
    ) -> "WorkingArray":
        """Uniformly random integers in [low, high], inclusive on both ends."""
        rng = rng or random.Random()
        return cls([rng.randint(low, high) for _ in range(length)])

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __setitem__(self, index: int, value: int) -> None:
        self.values[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"WorkingArray({self.values!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def swap(self, i: int, j: int) -> None:
        self.values[i], self.values[j] = self.values[j], self.values[i]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def snapshot(self) -> List[int]:
        return list(self.values)

    def max_value(self) -> int:
        """Largest element, or 0 for an empty array."""
        return max(self.values, default=0)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in zip(self.values, self.values[1:]))

    def to_dict(self) -> Dict[str, Any]:
        return {"values": self.snapshot(), "length": len(self.values)}
