"""One-at-a-time enumeration of m-element subsets.

The Enumerator produces the same lexicographic sequence as Generator, but
suspends its depth-first traversal between calls. The caller decides when
to stop, so nothing beyond the current subset is ever materialized.

Example:
    >>> from combinations import Enumerator
    >>> enum = Enumerator([0, 1, 2, 3])
    >>> comb = enum.first(2)
    >>> while comb:
    ...     print(comb)
    ...     comb = enum.next()
    [0, 1]
    [0, 2]
    [0, 3]
    [1, 2]
    [1, 3]
    [2, 3]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from combinations.traversal import VisitState, exclude_is_feasible

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Enumerator(Generic[T]):
    """Enumerates m-element subsets of a base sequence one at a time.

    An empty list from next() means the enumeration is exhausted. Further
    calls keep returning an empty list until first() restarts it.
    """

    def __init__(self, base: Sequence[T]) -> None:
        self.base = base
        self._m = 0
        self._cur_set: list[T] = []
        self._idx_stack: list[int] = []
        self._states: list[VisitState] = []

    def first(self, m: int) -> list[T]:
        """Restart the enumeration for subset size m and return the first subset.

        Args:
            m: Subset size.

        Returns:
            The first combination. For ``m == 0`` this is the empty
            combination, the only one there is. For ``m > n`` the
            enumeration is exhausted from the start and an empty list is
            returned.

        Raises:
            ValueError: If m is negative.
        """
        if m < 0:
            raise ValueError(f"m must be non-negative, got {m}")
        n = len(self.base)
        self._m = m
        self._cur_set = []
        self._idx_stack = [0]
        self._states = [VisitState.PENDING] * (n + 1)

        if m == 0 or m > n:
            self._idx_stack.clear()
            return []
        return self.next()

    def next(self) -> list[T]:
        """Resume the traversal and return the next combination.

        Returns:
            The next combination, or an empty list once exhausted.
        """
        n = len(self.base)
        m = self._m
        cur_set = self._cur_set
        idx_stack = self._idx_stack
        states = self._states

        while idx_stack:
            cur_idx = idx_stack[-1]
            state = states[cur_idx]
            if state == VisitState.PENDING:
                if len(cur_set) < m:
                    cur_set.append(self.base[cur_idx])
                    idx_stack.append(cur_idx + 1)
                    states[cur_idx] = VisitState.INCLUDED
                else:
                    idx_stack.pop()
                    return list(cur_set)
            elif state == VisitState.INCLUDED:
                cur_set.pop()
                if exclude_is_feasible(cur_idx, m - len(cur_set), n):
                    idx_stack.append(cur_idx + 1)
                    states[cur_idx] = VisitState.EXCLUDED
                else:
                    idx_stack.pop()
                    states[cur_idx] = VisitState.PENDING
            else:
                idx_stack.pop()
                states[cur_idx] = VisitState.PENDING

        return []

    @property
    def exhausted(self) -> bool:
        """True once next() has run out of combinations."""
        return not self._idx_stack

    def iterate(self, m: int) -> Iterator[list[T]]:
        """Yield every m-element subset, restarting the enumeration.

        Unlike the first()/next() protocol, the empty combination for
        ``m == 0`` is yielded exactly once.
        """
        comb = self.first(m)
        if m == 0:
            yield comb
            return
        count = 0
        while comb:
            count += 1
            yield comb
            comb = self.next()
        logger.debug(f"Enumerated {count} combinations of {m} from {len(self.base)}")

    def __iter__(self) -> Iterator[list[T]]:
        return self.iterate(self._m)
