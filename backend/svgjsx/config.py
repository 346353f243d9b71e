"""Application configuration from environment variables (prefix SVGJSX_)."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Resource policy
    max_file_size: int = 10 * 1024 * 1024  # bytes
    chunk_size: int = 100 * 1024  # reserved for streaming input; unused by the pipeline
    memory_limit_mb: float = 500.0

    # Worker offload: inputs above worker_threshold * max_file_size run in a worker process
    enable_workers: bool = True
    worker_threshold: float = 0.1
    worker_timeout: float = 120.0  # seconds

    model_config = {"env_prefix": "SVGJSX_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
