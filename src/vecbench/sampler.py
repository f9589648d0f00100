"""Random unit-norm embedding sampler."""

import logging

import numpy as np

from vecbench.embedding import EMBEDDING_DIM
from vecbench.exceptions import DegenerateEmbeddingError
from vecbench.types import Embedding

logger = logging.getLogger(__name__)

_TINY = np.finfo(np.float32).tiny


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a random generator, seeded for reproducible runs."""
    return np.random.default_rng(seed)


def sample_embedding(rng: np.random.Generator, dim: int = EMBEDDING_DIM) -> Embedding:
    """
    Sample one embedding uniformly on the unit hypersphere.

    Draws ``dim`` standard normal values and scales them by the reciprocal
    of their L2 norm. Advances the state of ``rng``; generators must not be
    shared between threads.

    Args:
        rng: Source of randomness.
        dim: Embedding dimension.

    Returns:
        Read-only float32 array of shape ``(dim,)`` with unit L2 norm.
    """
    values = rng.standard_normal(dim, dtype=np.float32)
    norm = np.linalg.norm(values)
    if norm < _TINY:
        raise DegenerateEmbeddingError(f"sampled vector has norm {norm}")

    values /= norm
    values.flags.writeable = False
    return values


def sample_embeddings(
    count: int,
    rng: np.random.Generator,
    dim: int = EMBEDDING_DIM,
) -> np.ndarray:
    """
    Sample a contiguous collection of embeddings.

    Args:
        count: Number of embeddings.
        rng: Source of randomness.
        dim: Embedding dimension.

    Returns:
        C-contiguous float32 array of shape ``(count, dim)``; row i is
        embedding i.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    logger.debug(f"Sampling {count} embeddings of dimension {dim}")
    values = rng.standard_normal((count, dim), dtype=np.float32)
    if count:
        norms = np.linalg.norm(values, axis=1, keepdims=True)
        if np.any(norms < _TINY):
            raise DegenerateEmbeddingError("sampled vector has zero norm")
        values /= norms

    values.flags.writeable = False
    return values
