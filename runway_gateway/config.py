"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "runway-gateway"
    log_level: str = "INFO"

    # Simulation
    simulation_runs: int = Field(2000, gt=0)
    horizon_days: int = Field(730, gt=0)
    random_seed: Optional[int] = None  # Unset in production: forecasts are stochastic

    # Calendar used to bucket expenses into days when a request names no timezone
    default_timezone: str = "UTC"


settings = Settings()
