"""Unit tests for the benchmark harness."""

from unittest.mock import patch

import numpy as np
import pytest

from vecbench.bench import Strategy, run_benchmark, run_strategy, time_strategy
from vecbench.exceptions import EquivalenceError


class TestRunStrategy:
    """Test running individual strategies."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_all_strategies_agree(self, strategy, query, candidates):
        """Test that every strategy matches the scalar baseline."""
        baseline = run_strategy(Strategy.SCALAR, query, candidates)

        distances = run_strategy(strategy, query, candidates)

        assert distances.shape == (len(candidates),)
        np.testing.assert_allclose(distances, baseline, rtol=1e-5)

    def test_time_strategy(self, query, candidates):
        """Test that timing returns distances and a duration."""
        distances, duration_ms = time_strategy(Strategy.BATCHED, query, candidates)

        assert isinstance(distances, np.ndarray)
        assert len(distances) == len(candidates)
        assert isinstance(duration_ms, float)
        assert duration_ms >= 0.0


class TestRunBenchmark:
    """Test the full benchmark."""

    def test_report(self):
        """Test report structure for all strategies."""
        report = run_benchmark(count=200, seed=42)

        assert report["count"] == 200
        assert report["dim"] == 1536
        assert report["seed"] == 42
        assert [t["strategy"] for t in report["timings"]] == ["scalar", "matmul", "batched"]
        for timing in report["timings"]:
            assert timing["duration_ms"] >= 0.0
            assert timing["max_abs_diff"] < 1e-5

    def test_selected_strategies(self):
        """Test timing only the requested strategies."""
        report = run_benchmark(count=20, seed=1, strategies=[Strategy.BATCHED])

        assert [t["strategy"] for t in report["timings"]] == ["batched"]

    def test_empty(self):
        """Test that zero candidates still produce a report."""
        report = run_benchmark(count=0, seed=1)

        assert all(t["max_abs_diff"] == 0.0 for t in report["timings"])

    def test_small_dimension(self):
        """Test benchmark with a reduced dimension."""
        report = run_benchmark(count=10, seed=3, dim=8)

        assert report["dim"] == 8

    def test_mismatch_raises(self):
        """Test that a strategy drifting from the scalar baseline fails the run."""

        def drifting(strategy, query, candidates, dim=1536):
            distances = run_strategy(strategy, query, candidates, dim)
            if strategy is Strategy.BATCHED:
                return distances + np.float32(0.01)
            return distances

        with patch("vecbench.bench.run_strategy", side_effect=drifting):
            with pytest.raises(EquivalenceError, match="batched"):
                run_benchmark(count=10, seed=1)
