"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com/v2"
    speaker_labels: bool = True
    speakers_expected: int = Field(default=2, ge=1)
    poll_interval: float = Field(default=3.0, ge=0.0)
    connect_timeout: float = Field(default=30.0, gt=0.0)
    read_timeout: float = Field(default=60.0, gt=0.0)
    write_timeout: float = Field(default=60.0, gt=0.0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
    )
