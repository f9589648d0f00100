"""Embedding type, dimension constant and unit-norm validation."""

from typing import Any

import numpy as np

from vecbench.exceptions import DimensionMismatchError, NotNormalizedError
from vecbench.types import Embedding

# Shared by the sampler, the validators and the batched reshape
EMBEDDING_DIM = 1536

NORM_ATOL = 1e-5


def check_dimension(vector: np.ndarray, dim: int = EMBEDDING_DIM) -> None:
    """
    Ensure a vector is 1-D with ``dim`` components.

    Raises:
        DimensionMismatchError: If the shape is not ``(dim,)``.
    """
    if vector.shape != (dim,):
        raise DimensionMismatchError(dim, vector.shape)


def is_unit_norm(values: Any, atol: float = NORM_ATOL) -> bool:
    """Return True if the L2 norm of ``values`` is 1.0 within ``atol``."""
    norm = np.linalg.norm(np.asarray(values, dtype=np.float32))
    return bool(np.isclose(norm, 1.0, rtol=0.0, atol=atol))


def as_embedding(values: Any, dim: int = EMBEDDING_DIM, atol: float = NORM_ATOL) -> Embedding:
    """
    Build a validated, read-only embedding.

    The invariant is checked once here; the distance operations trust it
    afterwards.

    Args:
        values: Sequence or array of ``dim`` numbers.
        dim: Expected dimension.
        atol: Allowed deviation of the L2 norm from 1.0.

    Returns:
        A C-contiguous float32 copy of ``values`` marked read-only.

    Raises:
        DimensionMismatchError: If ``values`` does not have ``dim`` components.
        NotNormalizedError: If the L2 norm is not 1.0 within ``atol``.
    """
    embedding = np.array(values, dtype=np.float32, order="C")
    check_dimension(embedding, dim)

    norm = float(np.linalg.norm(embedding))
    if not np.isclose(norm, 1.0, rtol=0.0, atol=atol):
        raise NotNormalizedError(norm, atol)

    embedding.flags.writeable = False
    return embedding
