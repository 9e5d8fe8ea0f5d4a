"""Pytest fixtures for combinations tests."""

from __future__ import annotations

import itertools

import pytest


@pytest.fixture
def base4() -> list[int]:
    return [0, 1, 2, 3]


@pytest.fixture
def expected_4_2() -> list[list[int]]:
    return [[0, 1], [0, 2], [0, 3], [1, 2], [1, 3], [2, 3]]


def reference_combinations(base, m):
    """Lexicographic m-subsets from itertools, as lists."""
    return [list(c) for c in itertools.combinations(base, m)]
