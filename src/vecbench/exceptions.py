"""Exceptions raised by vecbench."""


class VecbenchError(Exception):
    """Base class for vecbench errors."""


class DimensionMismatchError(VecbenchError, ValueError):
    """A vector or buffer does not have the expected dimension."""

    def __init__(self, expected: int, actual: object, what: str = "embedding"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} dimension mismatch: expected {expected}, got {actual}")


class NotNormalizedError(VecbenchError, ValueError):
    """An embedding does not have unit L2 norm."""

    def __init__(self, norm: float, atol: float):
        self.norm = norm
        self.atol = atol
        super().__init__(f"embedding L2 norm is {norm:.6f}, expected 1.0 +/- {atol}")


class DegenerateEmbeddingError(VecbenchError):
    """A sampled vector had (near) zero norm and cannot be normalized."""


class EquivalenceError(VecbenchError):
    """Two distance strategies disagreed beyond tolerance."""
