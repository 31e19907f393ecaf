"""
Custom exception hierarchy for release-signing.
"""

from __future__ import annotations

from pathlib import Path


class SigningError(Exception):
    """Base exception for all release-signing errors."""
    pass


# === Config Errors ===

class ConfigError(SigningError):
    """Configuration error."""
    pass


class ConfigReadError(ConfigError):
    """Signing credentials could not be read, parsed or completed."""
    def __init__(self, path: Path | str | None, reason: str, cause: Exception | None = None):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        self.cause = cause
        where = f"'{self.path}'" if self.path is not None else "<unknown source>"
        super().__init__(f"Cannot read signing config {where}: {reason}")


class PropertiesSyntaxError(ConfigReadError):
    """The properties file contains an invalid ``\\uXXXX`` escape sequence."""
    def __init__(self, path: Path | str | None, escape: str, cause: Exception | None = None):
        self.escape = escape
        super().__init__(path, f"invalid escape sequence {escape!r}", cause=cause)


class IncompleteCredentialsError(ConfigReadError):
    """Signing credentials are missing one or more required keys."""
    def __init__(self, path: Path | str | None, missing_keys: list[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(
            path,
            f"missing or empty keys: {', '.join(self.missing_keys)}",
        )
