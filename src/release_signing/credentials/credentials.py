"""
Release signing credential resolution.

A release build is signed with four values kept in a ``key.properties`` file
at the project root. The file is managed outside version control and is often
absent (debug builds, forks, contributor machines); in that case resolution
yields ``None`` and the build proceeds unsigned. When the file is present it
must be readable, otherwise the configuration phase fails.

Example:
    >>> creds = resolve(default_config_path(project_root))
    >>> if creds is not None:
    ...     apksigner_args = creds.to_properties()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from release_signing.credentials.properties import read_properties
from release_signing.exceptions import ConfigReadError, IncompleteCredentialsError

if TYPE_CHECKING:
    from release_signing.config.settings import SigningSettings

logger = logging.getLogger(__name__)

DEFAULT_PROPERTIES_FILE = "key.properties"

KEY_ALIAS = "keyAlias"
KEY_PASSWORD = "keyPassword"
STORE_FILE = "storeFile"
STORE_PASSWORD = "storePassword"

# Property-file key -> SigningCredentials attribute
PROPERTY_KEYS: dict[str, str] = {
    KEY_ALIAS: "key_alias",
    KEY_PASSWORD: "key_password",
    STORE_FILE: "store_file_path",
    STORE_PASSWORD: "store_password",
}


@dataclass(frozen=True)
class SigningCredentials:
    """
    The values needed to sign a release artifact.

    Passwords are excluded from ``repr`` so the record can be logged or shown
    in tracebacks without leaking secrets. A field is ``None`` when its key was
    absent from the source file.

    Attributes:
        key_alias: Alias of the signing key inside the keystore.
        key_password: Password for the key.
        store_file_path: Path to the keystore file, exactly as configured.
        store_password: Password for the keystore.
        source: File the values were read from, if any.
    """
    key_alias: str | None
    key_password: str | None = field(default=None, repr=False)
    store_file_path: str | None = None
    store_password: str | None = field(default=None, repr=False)
    source: Path | None = field(default=None, compare=False)

    @classmethod
    def from_properties(
        cls,
        properties: dict[str, str],
        source: Path | None = None,
    ) -> "SigningCredentials":
        """Build credentials from a parsed properties mapping."""
        values = {attr: properties.get(key) for key, attr in PROPERTY_KEYS.items()}
        return cls(source=source, **values)

    @property
    def is_complete(self) -> bool:
        return not self.missing_keys()

    def missing_keys(self) -> list[str]:
        """Property-file keys whose value is absent or empty."""
        return [key for key, attr in PROPERTY_KEYS.items() if not getattr(self, attr)]

    def store_file(self, base_dir: Path | str | None = None) -> Path:
        """
        Path to the keystore.

        Relative paths are resolved against ``base_dir`` (the module directory
        of the app being signed); absolute paths are returned unchanged.
        """
        if not self.store_file_path:
            raise IncompleteCredentialsError(self.source, [STORE_FILE])
        path = Path(self.store_file_path)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path
        return path

    def to_properties(self) -> dict[str, str]:
        """The credentials keyed by their property-file names, omitting absent values."""
        out: dict[str, str] = {}
        for key, attr in PROPERTY_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out


def default_config_path(project_root: Path | str | None = None) -> Path:
    """Conventional location of the signing properties file under ``project_root``."""
    root = Path(project_root) if project_root is not None else Path.cwd()
    return root / DEFAULT_PROPERTIES_FILE


def resolve(config_path: Path | str, *, strict: bool = False) -> SigningCredentials | None:
    """
    Resolve signing credentials from a properties file.

    Args:
        config_path: Path to the properties file.
        strict: If True, raise when any of the four keys is missing or empty
            instead of passing ``None`` fields to the caller.

    Returns:
        The credentials, or None when no file exists at ``config_path``.

    Raises:
        ConfigReadError: The file exists but cannot be read or parsed.
        IncompleteCredentialsError: ``strict`` is set and keys are missing.
    """
    path = Path(config_path)
    try:
        exists = path.exists()
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e), cause=e) from e
    if not exists:
        logger.info("No signing config at %s; release build will be unsigned", path)
        return None

    try:
        properties = read_properties(path)
    except ConfigReadError as e:
        logger.error("Failed to load signing config: %s", e)
        raise

    credentials = SigningCredentials.from_properties(properties, source=path)
    missing = credentials.missing_keys()
    if missing:
        if strict:
            raise IncompleteCredentialsError(path, missing)
        logger.warning("Signing config %s is missing keys: %s", path, ", ".join(missing))

    logger.debug("Loaded signing credentials for alias %r from %s", credentials.key_alias, path)
    return credentials


def resolve_from_settings(settings: "SigningSettings") -> SigningCredentials | None:
    """Resolve credentials using the path and strictness from ``settings``."""
    return resolve(settings.properties_path, strict=settings.strict)
