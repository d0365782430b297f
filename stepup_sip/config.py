"""Application settings loaded from the environment."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, overridable through ``SIP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Step-Up SIP Calculator"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

    # upper bounds applied to calculator inputs
    max_years: int = Field(default=100, ge=1)
    max_percentage: float = Field(default=100.0, gt=0)
    max_monthly_investment: float = Field(default=10_000_000.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
