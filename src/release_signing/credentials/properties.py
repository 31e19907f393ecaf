"""
Reader for Java ``.properties`` files.

``key.properties`` is written for Gradle, which loads it with
``java.util.Properties``. Parsing is delegated to ``javaproperties`` so the
same rules apply: ``=``, ``:`` or whitespace separators, ``#``/``!`` comment
lines, backslash escapes and line continuations, leading whitespace stripped
and trailing whitespace kept. Values are never unquoted or interpolated.
"""

from __future__ import annotations

import logging
from pathlib import Path

import javaproperties

from release_signing.exceptions import ConfigReadError, PropertiesSyntaxError

logger = logging.getLogger(__name__)


def read_properties(path: Path | str) -> dict[str, str]:
    """
    Read a properties file into a dict.

    The file is opened in binary mode and decoded as Latin-1, as
    ``Properties.load(InputStream)`` does; other characters must be written
    as ``\\uXXXX`` escapes. Later occurrences of a key override earlier ones.

    Args:
        path: Location of the properties file.

    Returns:
        Mapping of key to unescaped string value, in file order.

    Raises:
        PropertiesSyntaxError: The file contains an invalid ``\\uXXXX`` escape.
        ConfigReadError: The file cannot be opened or read.
    """
    path = Path(path)
    try:
        with path.open("rb") as fp:
            properties = javaproperties.load(fp, object_pairs_hook=dict)
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e), cause=e) from e
    except javaproperties.InvalidUEscapeError as e:
        raise PropertiesSyntaxError(path, e.escape, cause=e) from e

    logger.debug("Read %d properties from %s", len(properties), path)
    return properties
