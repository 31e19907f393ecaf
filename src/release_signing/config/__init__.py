"""
Configuration module for release-signing.

Provides environment-driven settings for locating the signing properties
file and configuring logging.
"""

from release_signing.config.settings import (
    SigningSettings,
    load_settings_from_env,
)

__all__ = [
    "SigningSettings",
    "load_settings_from_env",
]
