"""
Pydantic-based configuration models for inputguard.

Values come from environment variables and an optional .env file at deploy
time. Untrusted, per-request input must never be used to set them.
"""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from ..structured_logging.enhanced_logging_config import VALID_ENVIRONMENTS, VALID_FORMATS, get_logger

logger = get_logger(__name__)


def _parse_env_list(candidate: Any) -> list[str]:
    """Parse a string from the environment as JSON list or CSV."""
    if candidate is None:
        return []
    if isinstance(candidate, (list, tuple, set, frozenset)):
        return [str(item).strip() for item in candidate if str(item).strip()]
    s = str(candidate).strip()
    if not s:
        return []
    try:
        loaded = json.loads(s)
        if isinstance(loaded, list):
            return [str(item).strip() for item in loaded if str(item).strip()]
    except json.JSONDecodeError:
        pass
    return [item.strip() for item in s.split(",") if item.strip()]


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str = Field(default="local", description="Logging environment")
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="human", description="Log format")
    disable_logging: bool = Field(default=False, description="Disable all logging")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate logging environment."""
        if v not in VALID_ENVIRONMENTS:
            logger.error("Invalid logging environment", environment=v, valid_environments=VALID_ENVIRONMENTS)
            raise ValueError(f"Environment must be one of {VALID_ENVIRONMENTS}, got '{v}'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got '{v}'")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in VALID_FORMATS:
            raise ValueError(f"Log format must be one of {VALID_FORMATS}, got '{v}'")
        return v

    model_config = {"env_prefix": "LOGGING_", "case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict:
        """Convert to the dict shape expected by setup_enhanced_logging()."""
        return {
            "environment": self.environment,
            "level": self.level,
            "format": self.format,
            "disable_logging": self.disable_logging,
        }


class SanitizerConfig(BaseSettings):
    """Deploy-time knobs for the sanitizers."""

    max_filename_length: int = Field(default=255, description="Maximum sanitized filename length in characters")
    filename_fallback: str = Field(default="file", description="Filename returned when nothing safe remains")
    extra_allowed_extensions: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Extensions added to the built-in allow-list (JSON list or CSV)",
    )

    @field_validator("max_filename_length")
    @classmethod
    def validate_max_filename_length(cls, v: int) -> int:
        """Validate the filename length limit is usable."""
        if not 1 <= v <= 4096:
            raise ValueError("max_filename_length must be between 1 and 4096")
        return v

    @field_validator("filename_fallback")
    @classmethod
    def validate_filename_fallback(cls, v: str) -> str:
        """The fallback is returned verbatim, so it must already be a safe name."""
        if not v or v != v.strip(" ."):
            raise ValueError("filename_fallback must be non-empty without leading/trailing dots or spaces")
        if any(ch in v for ch in '/\\<>:"|?*') or any(ord(ch) < 0x20 for ch in v):
            raise ValueError("filename_fallback must not contain separators, reserved or control characters")
        return v

    @field_validator("extra_allowed_extensions", mode="before")
    @classmethod
    def parse_extra_allowed_extensions(cls, v: Any) -> list[str]:
        """Accept JSON or CSV and normalize to bare lower-case extensions."""
        return [item.lower().lstrip(".") for item in _parse_env_list(v) if item.lstrip(".")]

    model_config = {"env_prefix": "INPUTGUARD_", "case_sensitive": False, "extra": "ignore"}


class AppConfig(BaseSettings):
    """
    Composite configuration.

    Access via get_config() rather than instantiating directly.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sanitizer: SanitizerConfig = Field(default_factory=SanitizerConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict:
        """Convert to dict form for setup_enhanced_logging()."""
        return {
            "logging": self.logging.to_legacy_dict(),
            "max_filename_length": self.sanitizer.max_filename_length,
            "filename_fallback": self.sanitizer.filename_fallback,
            "extra_allowed_extensions": list(self.sanitizer.extra_allowed_extensions),
        }
