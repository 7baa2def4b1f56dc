"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from unix_emulator.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = self._get_env(
            "UNIX_EMU_START_DIR", os.path.expanduser("~")
        )
        self.sandbox_root: Optional[str] = self._get_optional_env(
            "UNIX_EMU_SANDBOX_ROOT"
        )
        self.body_terminator: str = self._get_env(
            "UNIX_EMU_BODY_TERMINATOR", "EOF"
        ).strip()
        self.max_visible_lines: int = self._get_positive_int_env(
            "UNIX_EMU_MAX_VISIBLE_LINES", 20
        )
        self.theme: str = self._get_env("UNIX_EMU_THEME", "dark").lower()
        self.log_level: str = self._get_env("UNIX_EMU_LOG_LEVEL", "WARNING").upper()
        self.log_file: Optional[str] = self._get_optional_env("UNIX_EMU_LOG_FILE")

        if not self.body_terminator:
            raise ConfigurationError("UNIX_EMU_BODY_TERMINATOR must not be blank")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get an environment variable, treating empty values as unset."""
        value = os.getenv(key)
        return value or None

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value


# Global settings instance
settings = Settings()
