"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from vecbench.sampler import make_rng, sample_embedding, sample_embeddings


@pytest.fixture
def rng():
    """Seeded generator so failures reproduce."""
    return make_rng(42)


@pytest.fixture
def query(rng):
    """Random unit-norm query embedding."""
    return sample_embedding(rng)


@pytest.fixture
def candidates(rng):
    """Contiguous matrix of 64 random unit-norm embeddings."""
    return sample_embeddings(64, rng)


@pytest.fixture
def axis_vectors():
    """D=4 query and candidates with known distances."""
    query = np.array([1, 0, 0, 0], dtype=np.float32)
    candidates = np.array(
        [[1, 0, 0, 0], [0, 1, 0, 0], [-1, 0, 0, 0]],
        dtype=np.float32,
    )
    return query, candidates
