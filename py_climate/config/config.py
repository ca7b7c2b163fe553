from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Load the project .env for local runs, without overriding the real environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Simulation Configuration
    default_seed: int = Field(default=0, description="Seed used when none is given")
    default_years: int = Field(default=1, ge=0, description="Simulated years for averaging")
    year_length: int = Field(default=365, ge=1, description="Simulated days per year")

    # Biome Configuration
    biome_scheme: str = Field(default="elevation", description="Default biome classification scheme")

    model_config = SettingsConfigDict(
        env_prefix="PY_CLIMATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # .env may hold variables for other tools
    )


# Instantiate singleton settings object
settings = Settings()
