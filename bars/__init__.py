"""
bars/
-----
Core data layer.  Public API:

    from bars import WorkingArray, HighlightState, Role
"""

from bars.working_array import WorkingArray, ARRAY_LENGTH, VALUE_MIN, VALUE_MAX
from bars.highlight     import HighlightState, Role, EMPTY_HIGHLIGHT

__all__ = [
    "WorkingArray",   "ARRAY_LENGTH",
    "VALUE_MIN",      "VALUE_MAX",
    "HighlightState", "Role",
    "EMPTY_HIGHLIGHT",
]
