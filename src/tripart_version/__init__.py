# SPDX-License-Identifier: MIT
"""Immutable MAJOR.MINOR.PATCH version values.

This package provides a small value type for three-component versions with
lenient text parsing (missing or negative parts become 0) and total ordering.

Example:
    >>> from tripart_version import VersionValue, parse_version, compare_versions
    >>>
    >>> version = parse_version(" 1-2 ")
    >>> str(version)
    '1.2.0'
    >>> version < VersionValue(1, 3)
    True
    >>>
    >>> compare_versions("1.2.3", "1.2")
    1
"""

__version__ = "0.1.0"

from .version import (
    VersionValue,
    parse_version,
    is_valid_version,
    try_parse_int,
    VersionError,
    MalformedVersionError,
    ComponentOutOfRangeError,
    DELIMITERS,
    MAX_COMPONENTS,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Version values
    "VersionValue",
    "parse_version",
    "is_valid_version",
    "try_parse_int",
    "DELIMITERS",
    "MAX_COMPONENTS",
    # Errors
    "VersionError",
    "MalformedVersionError",
    "ComponentOutOfRangeError",
    # Version comparison
    "compare_versions",
    "version_key",
]
