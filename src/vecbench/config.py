"""Configuration management for vecbench."""

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Benchmark settings."""

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECBENCH_",
        case_sensitive=False,
    )

    # Seed for the sampler; the benchmark is deterministic for a fixed seed
    seed: int = 42
    # Number of candidate embeddings to compare the query against
    candidate_count: int = 10000
    # Relative tolerance between the scalar baseline and other strategies
    rtol: float = 1e-5

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


# Global settings instance
settings = Settings()
