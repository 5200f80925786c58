from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class SpyKitSettings(BaseSettings):
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Level applied to the 'spykit' logger by configure_logging().",
    )
    LOG_CALLS: bool = Field(
        default=False,
        description=(
            "Log every recorded call, recorded return and dispenser resolution at DEBUG. "
            "Handy when a spy does not see the arguments a test expects."
        ),
    )
    VALUE_REPR_LIMIT: Optional[int] = Field(
        default=120,
        ge=10,
        description=(
            "Max characters of a value repr written to log lines. Set to None to disable "
            "truncation. Error messages are never truncated."
        ),
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("VALUE_REPR_LIMIT", mode="before")
    @classmethod
    def _noneify_repr_limit(cls, v):
        # Allow '', 'none', 'null' (case-insensitive) to disable truncation via env
        if isinstance(v, str) and v.strip().lower() in {"", "none", "null"}:
            return None
        return v

    def short_repr(self, value) -> str:
        text = repr(value)
        limit = self.VALUE_REPR_LIMIT
        if limit is None or len(text) <= limit:
            return text
        return text[: limit - 3] + "..."

    model_config = SettingsConfigDict(
        env_prefix="SPYKIT_",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = SpyKitSettings()
