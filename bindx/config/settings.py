"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from bindx.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.scan_timeout: float = self._get_positive_float_env(
            "BINDX_SCAN_TIMEOUT", 30.0
        )
        self.log_level: str = self._get_env("BINDX_LOG_LEVEL", "WARNING").upper()
        self.mdfind_path: str = self._get_env("BINDX_MDFIND_PATH", "mdfind")
        self.host: str = self._get_env("BINDX_HOST", "127.0.0.1")
        self.port: int = self._get_port_env("BINDX_PORT", 8000)
        self.reload: bool = self._get_env("BINDX_RELOAD", "0").lower() in {"1", "true", "yes"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_float_env(self, key: str, default: float) -> float:
        """Get a strictly positive float environment variable, raise error if invalid."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {raw!r}")
        return value

    def _get_port_env(self, key: str, default: int) -> int:
        """Get a TCP port environment variable, raise error if invalid."""
        raw = os.getenv(key)
        if not raw:
            return default
        if not raw.isdigit() or not 0 < int(raw) < 65536:
            raise ConfigurationError(f"Environment variable {key} must be a port number, got {raw!r}")
        return int(raw)

# Global settings instance
settings = Settings()
