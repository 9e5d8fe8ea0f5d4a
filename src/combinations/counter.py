"""Binomial coefficient counting.

C(n, m) is computed with Pascal's rule C(n, m) = C(n-1, m) + C(n-1, m-1),
so no factorials are formed. Results are memoized per instance, keyed by
the normalized pair (n, min(m, n-m)).

Counts are bounded by an integer width (64 bits by default, the width of
a machine size type). A sum that does not fit raises CountOverflowError
instead of returning a wrapped value.

Example:
    >>> from combinations import Counter
    >>> counter = Counter()
    >>> counter.count(4, 2)
    6
    >>> Counter(bits=None).count(100, 50)
    100891344545564193334812497256
"""

from __future__ import annotations

import logging

from combinations.errors import CountOverflowError

logger = logging.getLogger(__name__)

DEFAULT_BITS = 64


class Counter:
    """Counts the m-element subsets of an n-element set.

    Attributes:
        bits: Integer width of the count, or None for unbounded integers.
    """

    def __init__(self, bits: int | None = DEFAULT_BITS) -> None:
        if bits is not None and bits < 1:
            raise ValueError(f"bits must be positive, got {bits}")
        self.bits = bits
        self._mask = (1 << bits) - 1 if bits is not None else None
        self._counts: dict[tuple[int, int], int] = {}

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"Counter(bits={self.bits}, memo={len(self._counts)})"

    def count(self, n: int, m: int) -> int:
        """Return the number of m-element subsets of an n-element set.

        Args:
            n: Size of the set.
            m: Size of the subsets. ``m > n`` counts zero subsets.

        Returns:
            C(n, m).

        Raises:
            ValueError: If n or m is negative.
            CountOverflowError: If C(n, m) does not fit in ``bits`` bits.
        """
        if n < 0 or m < 0:
            raise ValueError(f"n and m must be non-negative, got n={n}, m={m}")
        if m > n:
            return 0
        return self._count(n, m)

    def _count(self, n: int, m: int) -> int:
        known = self._known(n, m)
        if known is not None:
            return known

        # Pascal's rule unrolled onto an explicit work stack, so the depth
        # of (n-1, m) chains does not grow the Python call stack.
        stack = [(n, min(m, n - m))]
        while stack:
            cur_n, cur_m = stack[-1]
            if (cur_n, cur_m) in self._counts:
                stack.pop()
                continue

            cnt0 = self._known(cur_n - 1, cur_m)
            cnt1 = self._known(cur_n - 1, cur_m - 1)
            if cnt0 is None:
                stack.append((cur_n - 1, min(cur_m, cur_n - 1 - cur_m)))
            if cnt1 is None:
                stack.append((cur_n - 1, min(cur_m - 1, cur_n - cur_m)))
            if cnt0 is None or cnt1 is None:
                continue

            cnt = cnt0 + cnt1
            if self._mask is not None:
                cnt &= self._mask
                # A wrapped unsigned sum is smaller than either addend.
                if cnt < (cnt0 | cnt1):
                    logger.debug(f"C({cur_n}, {cur_m}) overflowed {self.bits} bits")
                    raise CountOverflowError(cur_n, cur_m, self.bits)

            self._counts[(cur_n, cur_m)] = cnt
            stack.pop()

        return self._counts[(n, min(m, n - m))]

    def _known(self, n: int, m: int) -> int | None:
        """Return C(n, m) from a base case or the memo, None if not computed yet."""
        m = min(m, n - m)
        if m == 0:
            return 1
        if m == 1:
            if self._mask is not None and n > self._mask:
                raise CountOverflowError(n, 1, self.bits)
            return n
        return self._counts.get((n, m))
