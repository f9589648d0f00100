"""Benchmark harness comparing distance strategies."""

import logging
import time
from collections.abc import Sequence
from enum import Enum

import numpy as np

from vecbench.distance import batched_distance, matmul_distance, scalar_distance
from vecbench.embedding import EMBEDDING_DIM
from vecbench.exceptions import EquivalenceError
from vecbench.sampler import make_rng, sample_embedding, sample_embeddings
from vecbench.types import BenchmarkReport, Embedding, StrategyTiming

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """Ways of comparing one query against many candidates."""

    SCALAR = "scalar"
    MATMUL = "matmul"
    BATCHED = "batched"


def run_strategy(
    strategy: Strategy,
    query: Embedding,
    candidates: np.ndarray,
    dim: int = EMBEDDING_DIM,
) -> np.ndarray:
    """
    Compute all distances with one strategy.

    Args:
        strategy: Strategy to use.
        query: Query embedding.
        candidates: ``(N, dim)`` candidate matrix.
        dim: Embedding dimension.

    Returns:
        float32 array of N distances.
    """
    if strategy is Strategy.BATCHED:
        return batched_distance(query, candidates, dim=dim)

    pair_distance = scalar_distance if strategy is Strategy.SCALAR else matmul_distance
    out = np.empty(len(candidates), dtype=np.float32)
    for i, candidate in enumerate(candidates):
        out[i] = pair_distance(query, candidate, dim=dim, validate=False)
    return out


def time_strategy(
    strategy: Strategy,
    query: Embedding,
    candidates: np.ndarray,
    dim: int = EMBEDDING_DIM,
) -> tuple[np.ndarray, float]:
    """Run a strategy and return its distances and duration in milliseconds."""
    start = time.perf_counter()
    distances = run_strategy(strategy, query, candidates, dim)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{strategy.value} strategy took {duration_ms:.2f} ms")
    return distances, duration_ms


def run_benchmark(
    count: int,
    seed: int,
    strategies: Sequence[Strategy] = tuple(Strategy),
    dim: int = EMBEDDING_DIM,
    rtol: float = 1e-5,
) -> BenchmarkReport:
    """
    Sample data and time each strategy against the scalar baseline.

    Candidates are sampled before the query from one generator seeded
    with ``seed``.

    Args:
        count: Number of candidates.
        seed: Generator seed.
        strategies: Strategies to time, in order.
        dim: Embedding dimension.
        rtol: Relative tolerance against the scalar baseline.

    Returns:
        BenchmarkReport with one timing per strategy.

    Raises:
        EquivalenceError: If a strategy disagrees with the scalar baseline.
    """
    logger.info(f"Sampling {count} candidates (dim={dim}, seed={seed})")
    rng = make_rng(seed)
    candidates = sample_embeddings(count, rng, dim)
    query = sample_embedding(rng, dim)

    baseline = run_strategy(Strategy.SCALAR, query, candidates, dim)

    timings: list[StrategyTiming] = []
    for strategy in strategies:
        distances, duration_ms = time_strategy(strategy, query, candidates, dim)

        if not np.allclose(distances, baseline, rtol=rtol, atol=0.0):
            raise EquivalenceError(
                f"{strategy.value} distances differ from scalar baseline beyond rtol={rtol}"
            )
        max_abs_diff = float(np.max(np.abs(distances - baseline))) if count else 0.0

        timings.append({
            "strategy": strategy.value,
            "duration_ms": duration_ms,
            "max_abs_diff": max_abs_diff,
        })

    return {
        "count": count,
        "dim": dim,
        "seed": seed,
        "timings": timings,
    }
