"""vecbench - normalized cosine distance between embeddings, scalar and batched."""

from vecbench.distance import batched_distance, matmul_distance, scalar_distance
from vecbench.embedding import EMBEDDING_DIM, as_embedding
from vecbench.sampler import sample_embedding, sample_embeddings

__all__ = [
    "EMBEDDING_DIM",
    "as_embedding",
    "batched_distance",
    "matmul_distance",
    "sample_embedding",
    "sample_embeddings",
    "scalar_distance",
]
__version__ = "0.1.0"
