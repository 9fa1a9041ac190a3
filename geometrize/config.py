"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    geometrize_log_level: str = "info"

    # Base seed for the model's generators
    geometrize_seed: int = 0

    # Step defaults
    geometrize_shape_types: list[str] = ["rectangle"]
    geometrize_alpha: int = 128
    geometrize_shape_count: int = 50
    geometrize_max_shape_mutations: int = 100
    geometrize_max_workers: int = 1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
