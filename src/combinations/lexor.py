"""Random access to m-element subsets by lexicographic rank.

Rank 0 is {0, 1, ..., m-1} and rank C(n, m)-1 is {n-m, ..., n-1}. The
i-th subset is built directly: for each leading position, the number of
subsets that include it, C(n'-1, m'-1), decides whether rank i falls
among them. No other subset is generated along the way.

Example:
    >>> from combinations import Lexor
    >>> lexor = Lexor([0, 1, 2, 3], m=2)
    >>> lexor.get(3)
    [1, 2]
    >>> lexor.get(6)
    []
    >>> lexor.rank([1, 2])
    3
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from combinations.counter import DEFAULT_BITS, Counter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Lexor(Generic[T]):
    """Computes the i-th m-element subset of a base sequence.

    One Counter is kept for the lifetime of the instance, so repeated
    get() calls reuse its memo.

    Attributes:
        base: The borrowed base sequence.
        m: Current subset size.
    """

    def __init__(
        self,
        base: Sequence[T],
        m: int = 0,
        bits: int | None = DEFAULT_BITS,
    ) -> None:
        self.base = base
        self.set_m(m)
        self._counter = Counter(bits)

    def set_m(self, m: int) -> None:
        """Set the subset size for subsequent get() calls."""
        if m < 0:
            raise ValueError(f"m must be non-negative, got {m}")
        self.m = m

    def __len__(self) -> int:
        return self._counter.count(len(self.base), self.m)

    def __getitem__(self, i: int) -> list[T]:
        if not 0 <= i < len(self):
            raise IndexError(f"rank {i} out of range for C({len(self.base)}, {self.m})")
        return self.get(i)

    def get(self, i: int, m: int | None = None) -> list[T]:
        """Return the i-th m-element subset in lexicographic order.

        Args:
            i: Rank of the subset, 0-based.
            m: If given, becomes the subset size for this and later calls.

        Returns:
            The combination at rank i, or an empty list if i is outside
            [0, C(n, m)).

        Raises:
            CountOverflowError: If C(n, m) does not fit the counter width.
        """
        if m is not None:
            self.set_m(m)

        n = len(self.base)
        result: list[T] = []
        if i < 0 or i >= self._counter.count(n, self.m):
            logger.debug(f"Rank {i} out of range for C({n}, {self.m})")
            return result

        remaining_n = n
        remaining_m = self.m
        position = 0
        while remaining_m > 0:
            el_cnt = self._counter.count(remaining_n - 1, remaining_m - 1)
            if i < el_cnt:
                result.append(self.base[position])
                remaining_m -= 1
            else:
                i -= el_cnt
            remaining_n -= 1
            position += 1

        return result

    def rank(self, indices: Sequence[int]) -> int:
        """Return the lexicographic rank of a combination of positions.

        This is the inverse of get() for the index domain 0..n-1.

        Args:
            indices: Strictly increasing positions into the base sequence.
                Its length is taken as the subset size.

        Returns:
            The rank of the combination.

        Raises:
            ValueError: If the positions are out of range or not strictly
                increasing.
        """
        n = len(self.base)
        m = len(indices)
        prev = -1
        for cur in indices:
            if cur <= prev or cur >= n:
                raise ValueError(
                    f"indices must be strictly increasing within [0, {n}), got {list(indices)}"
                )
            prev = cur

        rank = 0
        prev = -1
        for k, cur in enumerate(indices):
            for skipped in range(prev + 1, cur):
                rank += self._counter.count(n - skipped - 1, m - k - 1)
            prev = cur
        return rank
