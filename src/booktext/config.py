"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Extraction
    context_window_char_limit: int = Field(
        default=3_500_000,
        gt=0,
        description="Maximum extracted text length accepted downstream (~875k tokens)",
    )
    enable_pdf_stub: bool = Field(
        default=True,
        description="Register the PDF placeholder parser",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
