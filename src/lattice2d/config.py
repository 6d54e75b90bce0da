"""Command line configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``LATTICE2D_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LATTICE2D_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "info"

    # Output: "json" or "grid"
    output_format: str = "json"
    grid_emitted_char: str = "#"
    grid_empty_char: str = "."


settings = Settings()
