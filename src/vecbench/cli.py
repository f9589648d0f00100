"""CLI for vecbench."""

import logging
import sys
from typing import List, Optional

import typer

from vecbench.bench import Strategy, run_benchmark
from vecbench.config import settings
from vecbench.embedding import EMBEDDING_DIM
from vecbench.exceptions import VecbenchError

# Initialize logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="vecbench",
    help="Embedding distance benchmark CLI",
    add_completion=False,
)


@app.command()
def bench(
    count: int = typer.Option(
        settings.candidate_count, "--count", "-n", min=0, help="Number of candidate embeddings"
    ),
    seed: int = typer.Option(settings.seed, "--seed", "-s", help="Random seed"),
    strategy: Optional[List[Strategy]] = typer.Option(
        None,
        "--strategy",
        "-t",
        help="Strategy to time (repeatable, default: all)",
    ),
) -> None:
    """
    Time scalar, per-pair matmul and batched distance computation.

    Example:
        vecbench bench --count 10000 --seed 42 -t scalar -t batched
    """
    strategies = strategy or list(Strategy)

    try:
        report = run_benchmark(
            count=count,
            seed=seed,
            strategies=strategies,
            rtol=settings.rtol,
        )
    except VecbenchError as e:
        logger.error(f"Benchmark failed: {e}")
        sys.exit(1)

    print(f"Compared 1 query against {report['count']} embeddings (dim={report['dim']})")
    for timing in report["timings"]:
        print(f"  {timing['strategy']} duration: {timing['duration_ms']:.2f} ms")
    max_diff = max((t["max_abs_diff"] for t in report["timings"]), default=0.0)
    print(f"Max deviation from scalar: {max_diff:.3e}")


@app.command()
def info() -> None:
    """Display configuration information."""
    print(f"Embedding dimension: {EMBEDDING_DIM}")
    print(f"Candidate count: {settings.candidate_count}")
    print(f"Seed: {settings.seed}")
    print(f"Relative tolerance: {settings.rtol}")


if __name__ == "__main__":
    app()
