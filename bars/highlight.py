"""
highlight.py — Per-Step Highlight Snapshot
============================================
Every time an algorithm wants the learner to see something, it hands
the driver a HighlightState describing which indices hold which role
*right now*.  The previous state is thrown away; nothing carries over
between steps.

Roles are independent and may overlap: an index can be CURRENT and
COMPARING at the same time (quicksort's pivot does exactly that).

A field left at its default means "no index holds that role".  Index 0
is a perfectly good role holder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Set, Tuple


# ---------------------------------------------------------------------------
# Role Enum — maps 1-to-1 with the bar CSS classes / palette
# ---------------------------------------------------------------------------
class Role(Enum):
    SORTED    = "sorted"      # green: inside the finalised prefix
    CURRENT   = "current"     # amber: index under active inspection
    MIN       = "min"         # purple: best candidate so far (selection)
    COMPARING = "comparing"   # red: being compared this step


@dataclass(frozen=True)
class HighlightState:
    """
    Attributes:
        sorted_prefix_count : Count of leading indices considered finalised.
        current             : Index under active inspection, or None.
        min_index           : Index holding the best candidate value, or None.
        comparing           : Indices being compared this step.
    """

    sorted_prefix_count: int                = 0
    current:             Optional[int]      = None
    min_index:           Optional[int]      = None
    comparing:           Tuple[int, ...]    = ()

    def roles_for(self, index: int) -> Set[Role]:
        roles: Set[Role] = set()
        if index < self.sorted_prefix_count:
            roles.add(Role.SORTED)
        if self.current is not None and index == self.current:
            roles.add(Role.CURRENT)
        if self.min_index is not None and index == self.min_index:
            roles.add(Role.MIN)
        if index in self.comparing:
            roles.add(Role.COMPARING)
        return roles

    def is_empty(self) -> bool:
        return self == EMPTY_HIGHLIGHT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sorted":    self.sorted_prefix_count,
            "current":   self.current,
            "min":       self.min_index,
            "comparing": list(self.comparing),
        }


EMPTY_HIGHLIGHT = HighlightState()
