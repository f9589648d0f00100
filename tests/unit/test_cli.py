"""Unit tests for the CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from vecbench.cli import app
from vecbench.exceptions import EquivalenceError

runner = CliRunner()


class TestBenchCommand:
    """Test the bench command."""

    def test_prints_durations(self):
        """Test one duration line per strategy."""
        result = runner.invoke(app, ["bench", "--count", "50", "--seed", "7"])

        assert result.exit_code == 0, result.output
        assert "against 50 embeddings (dim=1536)" in result.output
        assert "scalar duration:" in result.output
        assert "matmul duration:" in result.output
        assert "batched duration:" in result.output
        assert "Max deviation from scalar" in result.output

    def test_single_strategy(self):
        """Test restricting to one strategy."""
        result = runner.invoke(app, ["bench", "-n", "10", "-t", "batched"])

        assert result.exit_code == 0, result.output
        assert "batched duration:" in result.output
        assert "scalar duration:" not in result.output

    def test_unknown_strategy(self):
        """Test that an invalid strategy name is rejected."""
        result = runner.invoke(app, ["bench", "-t", "gpu"])

        assert result.exit_code != 0

    def test_equivalence_failure_exits_nonzero(self):
        """Test that a failed equivalence check exits with status 1."""
        with patch("vecbench.cli.run_benchmark", side_effect=EquivalenceError("mismatch")):
            result = runner.invoke(app, ["bench", "-n", "10"])

        assert result.exit_code == 1


def test_info():
    """Test info output."""
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "Embedding dimension: 1536" in result.output
    assert "Seed: 42" in result.output
