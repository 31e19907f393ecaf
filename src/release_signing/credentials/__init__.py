"""Release signing credential resolution."""

from release_signing.credentials.credentials import (
    DEFAULT_PROPERTIES_FILE,
    PROPERTY_KEYS,
    SigningCredentials,
    default_config_path,
    resolve,
    resolve_from_settings,
)
from release_signing.credentials.properties import read_properties

__all__ = [
    "DEFAULT_PROPERTIES_FILE",
    "PROPERTY_KEYS",
    "SigningCredentials",
    "default_config_path",
    "read_properties",
    "resolve",
    "resolve_from_settings",
]
