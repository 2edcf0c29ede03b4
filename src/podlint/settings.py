"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the podlint checker and CLI.

    Values are read from ``PODLINT_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PODLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Loader safety limits
    max_document_size: int = Field(default=5_000_000, gt=0)  # characters
    max_depth: int = Field(default=64, gt=0)
    max_node_count: int = Field(default=50_000, gt=0)
