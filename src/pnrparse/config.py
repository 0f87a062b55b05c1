"""
pnrparse configuration management using pydantic-settings.

Defaults for the command line; library calls take explicit options.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pnrparse.schemas import DEFAULT_NORMALISE_FORMAT, ParseOptions

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from PNR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PNR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    forgiving: bool = Field(
        default=False,
        description="Correct separators that contradict the age",
    )
    strict: bool = Field(
        default=False,
        description="Reject age/separator contradictions and future birth dates",
    )
    normalise_format: str = Field(
        default=DEFAULT_NORMALISE_FORMAT,
        description="Normalisation template",
    )

    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def parse_options(self) -> ParseOptions:
        """Build parse options from the configured defaults."""
        return ParseOptions(
            forgiving=self.forgiving,
            strict=self.strict,
            normalise_format=self.normalise_format,
        )
