"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from dirsnapshot.entities.snapshot_options import PathMode, SnapshotOptions
from dirsnapshot.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.recursive: bool = self._get_bool_env("DIRSNAPSHOT_RECURSIVE", False)
        self.files_only: bool = self._get_bool_env("DIRSNAPSHOT_FILES_ONLY", False)
        self.path_mode: PathMode = self._get_path_mode_env(
            "DIRSNAPSHOT_PATH_MODE", PathMode.NAME
        )
        self.log_level: str = self._get_env("DIRSNAPSHOT_LOG_LEVEL", "INFO").upper()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable, raise error if it is not a boolean."""
        value = os.getenv(key)
        if value is None:
            return default
        value = value.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ConfigurationError(f"Environment variable {key} must be a boolean, got {value!r}")

    def _get_path_mode_env(self, key: str, default: PathMode) -> PathMode:
        """Get a path mode environment variable, raise error if it is unknown."""
        value = os.getenv(key)
        if not value:
            return default
        try:
            return PathMode(value.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be one of "
                f"{', '.join(m.value for m in PathMode)}, got {value!r}"
            )

    def default_options(self) -> SnapshotOptions:
        """Snapshot options built from the configured defaults."""
        return SnapshotOptions.from_path_mode(
            self.path_mode, recursive=self.recursive, files_only=self.files_only
        )


# Global settings instance
settings = Settings()
