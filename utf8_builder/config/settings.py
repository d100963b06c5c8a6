from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Builder configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UTF8_BUILDER_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"

    accumulator_backend: str = "growable"
    accumulator_capacity: PositiveInt = 65536
    accumulator_max_size: PositiveInt | None = None
