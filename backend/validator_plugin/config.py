"""Plugin configuration via environment variables."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables."""

    # Identity reported to the core validator (empty = no id)
    PLUGIN_ID: str = "SamplePlugin"

    # Inputs
    INPUT_CONTENT_TO_VALIDATE: str = Field(default="contentToValidate", min_length=1)

    # Size check thresholds (bytes)
    SIZE_WARNING_THRESHOLD: int = Field(default=1024, ge=0)
    SIZE_ERROR_THRESHOLD: int = Field(default=10240, ge=0)

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {
        "env_prefix": "VALIDATOR_PLUGIN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _check_thresholds(self) -> "Settings":
        if self.SIZE_WARNING_THRESHOLD >= self.SIZE_ERROR_THRESHOLD:
            raise ValueError(
                "SIZE_WARNING_THRESHOLD must be lower than SIZE_ERROR_THRESHOLD "
                f"({self.SIZE_WARNING_THRESHOLD} >= {self.SIZE_ERROR_THRESHOLD})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
