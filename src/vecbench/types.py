"""Type definitions for vecbench."""

from typing import TypedDict

import numpy as np
import numpy.typing as npt

# 1-D, C-contiguous float32 vector of unit L2 norm
Embedding = npt.NDArray[np.float32]


class StrategyTiming(TypedDict):
    """Timing for one distance strategy."""

    strategy: str
    duration_ms: float
    max_abs_diff: float


class BenchmarkReport(TypedDict):
    """Result of a benchmark run."""

    count: int
    dim: int
    seed: int
    timings: list[StrategyTiming]
