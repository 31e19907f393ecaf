"""
Configuration settings for release-signing.

Settings come from environment variables so that CI jobs can point the
resolver at a properties file written from their secret store.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from release_signing.credentials.credentials import DEFAULT_PROPERTIES_FILE
from release_signing.exceptions import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no", "")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be one of true/false, got {raw!r}")


@dataclass
class SigningSettings:
    """
    Settings for resolving release signing credentials.

    Example:
        >>> settings = SigningSettings.from_env()
        >>> settings.configure_logging()
        >>> creds = resolve_from_settings(settings)

    Environment Variables:
        SIGNING_PROPERTIES_PATH: Path to the properties file (default: key.properties)
        SIGNING_STRICT: Reject files with missing keys ("true"/"false", default: false)
        LOG_LEVEL: Logging level (default: INFO)

    Variables already set in the environment take precedence over those
    loaded from an env file.
    """
    properties_path: Path = Path(DEFAULT_PROPERTIES_FILE)
    strict: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> "SigningSettings":
        """Load settings from environment variables, after loading ``env_file`` if given."""
        if env_file is not None:
            load_dotenv(env_file)
        return cls(
            properties_path=Path(os.getenv("SIGNING_PROPERTIES_PATH", DEFAULT_PROPERTIES_FILE)),
            strict=_parse_bool("SIGNING_STRICT", os.getenv("SIGNING_STRICT", "false")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def configure_logging(self):
        """Configure logging based on settings."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )


def load_settings_from_env(env_file: Path | str | None = None) -> SigningSettings:
    """
    Convenience function to load settings from environment.

    Returns:
        SigningSettings loaded from environment variables
    """
    return SigningSettings.from_env(env_file)
