"""Tests for bulk generation."""

from __future__ import annotations

import pytest

from combinations import STRATEGIES, CountOverflowError, GenerationStats, Generator
from tests.conftest import reference_combinations


class TestGenerator:
    """Tests for Generator in both strategies."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_concrete_scenario(self, strategy, base4, expected_4_2):
        gen = Generator(base4, strategy=strategy)
        gen.generate(2)
        assert gen.combinations == expected_4_2
        assert len(gen) == 6

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_m_zero_yields_one_empty_combination(self, strategy, base4):
        gen = Generator(base4, strategy=strategy)
        gen.generate(0)
        assert gen.combinations == [[]]

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_empty_base_m_zero(self, strategy):
        gen = Generator([], strategy=strategy)
        gen.generate(0)
        assert gen.combinations == [[]]

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_m_greater_than_n_yields_nothing(self, strategy, base4):
        gen = Generator(base4, strategy=strategy)
        stats = gen.generate(5)
        assert gen.combinations == []
        assert stats.count == 0

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_m_equals_n(self, strategy, base4):
        gen = Generator(base4, strategy=strategy)
        gen.generate(4)
        assert gen.combinations == [[0, 1, 2, 3]]

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_matches_itertools(self, strategy):
        base = list("abcdefg")
        gen = Generator(base, strategy=strategy)
        for m in range(len(base) + 2):
            gen.generate(m)
            assert gen.combinations == reference_combinations(base, m)

    def test_values_come_from_base(self):
        gen = Generator(["x", "y", "z"])
        gen.generate(2)
        assert gen.combinations == [["x", "y"], ["x", "z"], ["y", "z"]]

    def test_generate_clears_previous_result(self, base4):
        gen = Generator(base4)
        gen.generate(3)
        gen.generate(1)
        assert gen.combinations == [[0], [1], [2], [3]]

    def test_iteration_and_indexing(self, base4, expected_4_2):
        gen = Generator(base4)
        gen.generate(2)
        assert list(gen) == expected_4_2
        assert gen[3] == [1, 2]

    def test_strategy_override_per_call(self, base4):
        gen = Generator(base4)
        stats = gen.generate(2, strategy="iterative")
        assert stats.strategy == "iterative"
        assert gen.strategy == "recursive"

    def test_stats(self, base4):
        stats = Generator(base4).generate(2)
        assert isinstance(stats, GenerationStats)
        assert (stats.n, stats.m, stats.count) == (4, 2, 6)
        assert "6 combinations" in repr(stats)

    def test_unknown_strategy_raises(self, base4):
        with pytest.raises(ValueError, match="Unknown strategy"):
            Generator(base4, strategy="bogus")
        with pytest.raises(ValueError, match="Unknown strategy"):
            Generator(base4).generate(2, strategy="bogus")

    def test_negative_m_raises(self, base4):
        with pytest.raises(ValueError):
            Generator(base4).generate(-1)

    def test_overflow_propagates_before_generation(self):
        gen = Generator(list(range(40)), bits=32)
        with pytest.raises(CountOverflowError):
            gen.generate(20)
        assert len(gen) == 0

    def test_iterative_handles_deep_sets(self):
        base = list(range(3000))
        gen = Generator(base, strategy="iterative")
        gen.generate(1)
        assert len(gen) == 3000
        assert gen[-1] == [2999]

    def test_iterative_handles_deep_sets_with_sizing_count(self):
        gen = Generator(range(1500), strategy="iterative")
        stats = gen.generate(2)
        assert stats.count == 1124250
        assert gen[0] == [0, 1]
        assert gen[1498] == [0, 1499]
        assert gen[-1] == [1498, 1499]
