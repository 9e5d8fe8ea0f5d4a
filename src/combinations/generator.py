"""Bulk generation of every m-element subset of a base sequence.

The generator walks the choose-or-skip decision tree over positions
0..n-1 depth first: at each position it first includes the element, then
skips it if enough positions remain to fill the subset. Complete subsets
are collected in lexicographic order of their index tuples.

Two strategies produce identical output:

- recursive: one Python call per decision, stack depth grows with n.
- iterative: an explicit position stack with a VisitState per position,
  stack depth independent of n.

Example:
    >>> from combinations import Generator
    >>> gen = Generator([0, 1, 2, 3])
    >>> gen.generate(2)
    GenerationStats(recursive, n=4, m=2, 6 combinations)
    >>> gen.combinations
    [[0, 1], [0, 2], [0, 3], [1, 2], [1, 3], [2, 3]]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from combinations.counter import DEFAULT_BITS, Counter
from combinations.traversal import VisitState, exclude_is_feasible

logger = logging.getLogger(__name__)

T = TypeVar("T")

STRATEGIES = ("recursive", "iterative")


@dataclass
class GenerationStats:
    """Summary of one generate() call.

    Attributes:
        strategy: The traversal strategy that was used.
        n: Size of the base sequence.
        m: Requested subset size.
        count: Number of combinations produced.
    """

    strategy: str
    n: int
    m: int
    count: int

    def __repr__(self) -> str:
        return (
            f"GenerationStats({self.strategy}, n={self.n}, m={self.m}, "
            f"{self.count} combinations)"
        )


class Generator(Generic[T]):
    """Materializes all m-element subsets of a base sequence.

    The base sequence is borrowed, not copied. It must not change while the
    generator is in use.

    Attributes:
        base: The borrowed base sequence.
        strategy: "recursive" or "iterative".
        bits: Integer width handed to the sizing Counter.
    """

    def __init__(
        self,
        base: Sequence[T],
        strategy: str = "recursive",
        bits: int | None = DEFAULT_BITS,
    ) -> None:
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {strategy!r}. Valid: {STRATEGIES}")
        self.base = base
        self.strategy = strategy
        self.bits = bits
        self._combinations: list[list[T]] = []
        self._m = 0

    @property
    def combinations(self) -> list[list[T]]:
        """The combinations produced by the last generate() call."""
        return self._combinations

    def __len__(self) -> int:
        return len(self._combinations)

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self._combinations)

    def __getitem__(self, index: int) -> list[T]:
        return self._combinations[index]

    def generate(self, m: int, strategy: str | None = None) -> GenerationStats:
        """Generate all m-element subsets of the base sequence.

        Any previous result is discarded.

        Args:
            m: Subset size. ``m == 0`` yields one empty combination,
                ``m > n`` yields none.
            strategy: Overrides the instance strategy for this call.

        Returns:
            GenerationStats describing the run.

        Raises:
            ValueError: If m is negative or the strategy is unknown.
            CountOverflowError: If C(n, m) does not fit the counter width.
        """
        strategy = strategy or self.strategy
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {strategy!r}. Valid: {STRATEGIES}")

        n = len(self.base)
        self._combinations = []
        # Sizing also surfaces overflow before any work is done.
        expected = Counter(self.bits).count(n, m)
        self._m = m

        logger.info(
            f"Generating {expected} combinations of {m} from {n} elements ({strategy})"
        )

        if m <= n:
            if strategy == "recursive":
                self._generate_rec(0, [])
            else:
                self._generate_iter()

        logger.debug(f"Generated {len(self._combinations)} combinations")
        return GenerationStats(strategy=strategy, n=n, m=m, count=len(self._combinations))

    def _generate_rec(self, cur_idx: int, cur_set: list[T]) -> None:
        if len(cur_set) < self._m:
            cur_set.append(self.base[cur_idx])
            self._generate_rec(cur_idx + 1, cur_set)
            cur_set.pop()
            if exclude_is_feasible(cur_idx, self._m - len(cur_set), len(self.base)):
                self._generate_rec(cur_idx + 1, cur_set)
        else:
            self._combinations.append(list(cur_set))

    def _generate_iter(self) -> None:
        n = len(self.base)
        m = self._m
        cur_set: list[T] = []
        idx_stack = [0]
        states = [VisitState.PENDING] * (n + 1)

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
                    self._combinations.append(list(cur_set))
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
