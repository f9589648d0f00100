"""Normalized cosine distance between unit-norm embeddings.

Three strategies compute the same metric:

* ``scalar_distance``: one dot product per pair.
* ``matmul_distance``: one ``(1 x D) @ (D x 1)`` matrix product per pair.
* ``batched_distance``: one ``(N x D) @ (D x 1)`` matrix product for a whole
  candidate collection.

All inputs are assumed to have unit L2 norm (see ``as_embedding``). Under that
assumption the dot product is the cosine similarity ``s`` and the distance is
``(1 - s) / 2``, in ``[0, 1]``.
"""

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from vecbench.embedding import EMBEDDING_DIM, check_dimension
from vecbench.exceptions import DimensionMismatchError
from vecbench.types import Embedding

logger = logging.getLogger(__name__)

_ONE = np.float32(1.0)
_TWO = np.float32(2.0)


def normalized_cosine_distance(similarity: Any) -> Any:
    """Map cosine similarity in [-1, 1] to distance in [0, 1]."""
    return (_ONE - similarity) / _TWO


def scalar_distance(
    a: Embedding,
    b: Embedding,
    *,
    dim: int = EMBEDDING_DIM,
    validate: bool = True,
) -> float:
    """
    Distance between two embeddings.

    Args:
        a: First unit-norm embedding.
        b: Second unit-norm embedding.
        dim: Expected dimension.
        validate: Check both shapes before computing. Pass False to skip
            the check on hot paths where the caller guarantees it.

    Returns:
        Normalized cosine distance.

    Raises:
        DimensionMismatchError: If ``validate`` and a shape is not ``(dim,)``.
    """
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    if validate:
        check_dimension(a, dim)
        check_dimension(b, dim)

    return float(normalized_cosine_distance(np.dot(a, b)))


def matmul_distance(
    a: Embedding,
    b: Embedding,
    *,
    dim: int = EMBEDDING_DIM,
    validate: bool = True,
) -> float:
    """
    Distance between two embeddings as a 1x1 matrix product.

    Same metric as ``scalar_distance``, computed by treating ``a`` as a row
    and ``b`` as a column matrix.
    """
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    if validate:
        check_dimension(a, dim)
        check_dimension(b, dim)

    product = a.reshape(1, dim) @ b.reshape(dim, 1)
    return float(normalized_cosine_distance(product).reshape(()))


def as_candidate_matrix(
    candidates: Iterable[Any] | np.ndarray,
    dim: int = EMBEDDING_DIM,
    validate: bool = True,
) -> np.ndarray:
    """
    View a candidate collection as an ``N x dim`` float32 matrix.

    Row-major float32 storage is reinterpreted without copying:

    * a 2-D C-contiguous float32 array is returned as is;
    * a flat 1-D float32 buffer of length ``N * dim`` is reshaped in place.

    Any other layout (a list of embeddings, another dtype, a strided view)
    is copied once into a contiguous matrix.

    Args:
        candidates: Embeddings, a 2-D array, or a flat buffer.
        dim: Embedding dimension.
        validate: Check each row of a list before stacking. The matrix width
            is always checked.

    Returns:
        C-contiguous float32 array of shape ``(N, dim)``.

    Raises:
        DimensionMismatchError: If the rows are not ``dim`` wide or the flat
            buffer length is not a multiple of ``dim``.
    """
    if isinstance(candidates, np.ndarray):
        if candidates.ndim == 1:
            if candidates.size % dim:
                raise DimensionMismatchError(
                    dim, f"length {candidates.size}", what="flat candidate buffer"
                )
            matrix = candidates.reshape(-1, dim)
        elif candidates.ndim == 2:
            matrix = candidates
        else:
            raise DimensionMismatchError(dim, candidates.shape, what="candidate matrix")

        if matrix.shape[1] != dim:
            raise DimensionMismatchError(dim, matrix.shape, what="candidate matrix")

        if matrix.dtype != np.float32 or not matrix.flags.c_contiguous:
            logger.debug(f"Copying {matrix.dtype} candidates of shape {matrix.shape} to float32 rows")
            matrix = np.ascontiguousarray(matrix, dtype=np.float32)
        return matrix

    rows = [np.asarray(row, dtype=np.float32) for row in candidates]
    if not rows:
        return np.empty((0, dim), dtype=np.float32)

    if validate:
        for i, row in enumerate(rows):
            if row.shape != (dim,):
                raise DimensionMismatchError(dim, row.shape, what=f"candidate {i}")

    logger.debug(f"Stacking {len(rows)} candidates into a contiguous matrix")
    matrix = np.stack(rows)
    if matrix.ndim != 2 or matrix.shape[1] != dim:
        raise DimensionMismatchError(dim, matrix.shape, what="candidate matrix")
    return matrix


def batched_distance(
    query: Embedding,
    candidates: Iterable[Any] | np.ndarray,
    *,
    dim: int = EMBEDDING_DIM,
    validate: bool = True,
) -> np.ndarray:
    """
    Distances between a query and every candidate in one matrix product.

    The candidates form an ``N x dim`` matrix and the query a ``dim x 1``
    column; their product is the ``N x 1`` column of cosine similarities,
    which is mapped to distances and flattened.

    Args:
        query: Unit-norm query embedding.
        candidates: Unit-norm candidates; see ``as_candidate_matrix`` for
            the accepted layouts.
        dim: Embedding dimension.
        validate: Check the query shape and, for a list of candidates, each
            row shape before computing. The candidate matrix width is
            checked either way.

    Returns:
        float32 array of shape ``(N,)``; entry i is the distance between
        ``query`` and candidate i. Empty when there are no candidates.

    Raises:
        DimensionMismatchError: If the query or candidates are not ``dim`` wide.
    """
    query = np.asarray(query, dtype=np.float32)
    if validate:
        check_dimension(query, dim)

    matrix = as_candidate_matrix(candidates, dim, validate=validate)
    similarities = matrix @ query.reshape(dim, 1)
    return normalized_cosine_distance(similarities).ravel()
