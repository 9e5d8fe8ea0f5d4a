"""Visit states for the explicit-stack depth-first traversal.

Each position on the traversal stack records how far its choose-or-skip
decision has progressed, standing in for a suspended recursive call.
"""

from __future__ import annotations

from enum import IntEnum


class VisitState(IntEnum):
    """Progress of one position in the include/exclude decision tree."""

    PENDING = 0
    """Not yet visited; the include branch comes next."""

    INCLUDED = 1
    """Back from the include branch; the exclude branch is next if feasible."""

    EXCLUDED = 2
    """Back from the exclude branch; pop and reset."""


def exclude_is_feasible(position: int, remaining: int, n: int) -> bool:
    """Whether skipping ``position`` still leaves room for ``remaining`` slots."""
    return position + remaining < n
