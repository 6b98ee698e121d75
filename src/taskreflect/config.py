# taskreflect/config.py
"""
Environment-driven settings.

Values come from the process environment, optionally seeded from a
``.env`` file via python-dotenv.
"""
# ==================== Imports ====================
import os
import logging
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .utils.logger import parse_level

# ==================== Constants ====================
logger = logging.getLogger("taskreflect.config")

DEFAULT_ENV_FILE = ".env"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 0

TIMEOUT_ENV = "TASKREFLECT_TOOL_TIMEOUT"
MAX_RETRIES_ENV = "TASKREFLECT_MAX_RETRIES"
LOG_LEVEL_ENV = "TASKREFLECT_LOG_LEVEL"


# ==================== Class Definitions ====================
class Settings(BaseModel):
    """Runtime settings shared by tools and the CLI"""

    tool_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    log_level: int = logging.INFO

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level(cls, value):
        return parse_level(value)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults"""
        env = os.environ if environ is None else environ
        values = {}
        if env.get(TIMEOUT_ENV):
            values["tool_timeout"] = env[TIMEOUT_ENV]
        if env.get(MAX_RETRIES_ENV):
            values["max_retries"] = env[MAX_RETRIES_ENV]
        if env.get(LOG_LEVEL_ENV):
            values["log_level"] = env[LOG_LEVEL_ENV]
        return cls(**values)


# ==================== Functions ====================
def load_env_file(path: Optional[str] = None) -> bool:
    """Load a dotenv file into the environment.

    Args:
        path: Explicit file to load; defaults to ``.env`` when it exists

    Returns:
        True if a file was loaded
    """
    from dotenv import load_dotenv

    if path:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Environment file not found: {path}")
        load_dotenv(path)
        logger.debug(f"Loaded environment from {path}")
        return True
    if os.path.exists(DEFAULT_ENV_FILE):
        load_dotenv(DEFAULT_ENV_FILE)
        logger.debug(f"Loaded environment from {DEFAULT_ENV_FILE}")
        return True
    return False


def get_settings() -> Settings:
    return Settings.from_env()
