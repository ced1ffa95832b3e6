from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class MRZSettings(BaseSettings):
    """Ambient settings; none of them influence parsing or validation results."""

    model_config = SettingsConfigDict(env_prefix="MRZ_", env_file=".env", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = True
    mask_names: bool = True


@lru_cache(maxsize=1)
def get_settings() -> MRZSettings:
    # Read on first use so a bad environment cannot break importing the package.
    return MRZSettings()
