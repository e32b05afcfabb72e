"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sort the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "selection": AlgoInfo(key, label, fn, pseudocode, …),
        …
    }

Every `fn` is a coroutine function `fn(driver)` that sorts
driver.array through the driver's primitives and ends with
driver.finish().  Adding a sort is: write the coroutine, add one entry
here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble"
    label:            str                    # human label, e.g. "Bubble Sort"
    fn:               Callable               # the strategy coroutine
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    stable:           bool      = False      # equal values keep their order?
    complexity_time:  str       = ""         # e.g. "O(n²)"
    complexity_space: str       = ""         # e.g. "O(1)"
    description:      str       = ""         # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        tags=["in-place", "quadratic"],
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Find the smallest remaining value, swap it to the front. Ties keep the leftmost minimum.",
    ),

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        tags=["in-place", "quadratic", "adjacent-swaps"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swap out-of-order neighbours; the largest value bubbles to the end each pass.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        tags=["in-place", "quadratic", "adaptive"],
        stable=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grow a sorted prefix; shift larger values right to make room for the next one.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        tags=["in-place", "divide-and-conquer", "recursive"],
        complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
        description="Partition around the last element (Lomuto), then sort each side.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
]
