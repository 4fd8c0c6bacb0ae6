"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
The analysis functions never read settings themselves; callers (the CLI)
read them and pass explicit parameters.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: SHEETSENSE_
    """

    model_config = SettingsConfigDict(
        env_prefix="SHEETSENSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Type inference
    type_sample_size: int = Field(
        default=10,
        description="Non-blank values sampled per column for type inference",
    )
    type_numeric_threshold: float = Field(
        default=0.7,
        description="Numeric fraction a column must exceed to be Numeric",
    )
    statistics_sample_size: int = Field(
        default=20,
        description="Values sampled when classifying columns for statistics",
    )
    correlation_sample_size: int = Field(default=20)
    correlation_numeric_threshold: float = Field(
        default=0.8,
        description="Stricter numeric threshold for correlation eligibility",
    )

    # Aggregation
    chart_max_partitions: int = Field(
        default=50,
        description="First-seen partitions kept in a chart series",
    )
    pie_max_slices: int = Field(default=10)

    # Text analytics
    word_frequency_top_n: int = Field(default=100)
    word_cloud_min_text_length: int = Field(
        default=2,
        description="Minimum length of a value counted as text for word clouds",
    )
    sentiment_min_text_length: int = Field(
        default=5,
        description="Minimum length of a value counted as text for sentiment",
    )
    lexicon_path: Path | None = Field(
        default=None,
        description="YAML lexicon overriding the packaged stop words and sentiment words",
    )

    # Word cloud layout
    word_cloud_width: int = Field(default=800)
    word_cloud_height: int = Field(default=400)

    # Preview
    preview_page_size: int = Field(default=20)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
