"""Application configuration using Pydantic Settings."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Search settings (overridable from environment variables or .env)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = Field("photo-search")
    ENVIRONMENT: str = Field("development")
    DEBUG: bool = Field(False)
    LOG_LEVEL: str = Field("INFO")

    # Database
    DATABASE_URL: str = Field("sqlite:///./photo_search.db")

    # Recommendations
    MAX_APPBAR_FILTERS: int = Field(7, ge=1)
    RECOMMENDATION_SCAN_FRACTION: float = Field(0.5, gt=0.0, le=1.0)
    MOST_RELEVANT_FILTER_OCCURRENCE: int = Field(10000)

    # Curators
    MIN_CLUSTER_SIZE: int = Field(2, ge=1)
    MAGIC_MIN_MATCHES: int = Field(3, ge=0)  # strictly more than this
    ONLY_THEM_MAX_FACES: int = Field(4, ge=1)


settings = Settings()
