"""
release-signing - resolve release signing credentials for mobile app builds.

Reads the four signing values (key alias, key password, keystore path and
keystore password) from a ``key.properties`` file and hands them to whatever
tool signs the artifact. A missing file means an unsigned build; an unreadable
or malformed one is a configuration error.

Example:
    from release_signing import resolve, default_config_path

    creds = resolve(default_config_path("/path/to/project"))
    if creds is None:
        print("building unsigned")
    else:
        keystore = creds.store_file(base_dir="/path/to/project/android/app")
"""

from release_signing.credentials import (
    SigningCredentials,
    default_config_path,
    read_properties,
    resolve,
    resolve_from_settings,
)
from release_signing.config import SigningSettings, load_settings_from_env
from release_signing.exceptions import (
    SigningError,
    ConfigError,
    ConfigReadError,
    PropertiesSyntaxError,
    IncompleteCredentialsError,
)

__version__ = "0.1.0"

__all__ = [
    # Credentials
    "SigningCredentials",
    "default_config_path",
    "read_properties",
    "resolve",
    "resolve_from_settings",
    # Config
    "SigningSettings",
    "load_settings_from_env",
    # Exceptions
    "SigningError",
    "ConfigError",
    "ConfigReadError",
    "PropertiesSyntaxError",
    "IncompleteCredentialsError",
]
