# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or VersionValue objects.

Strings are parsed with the same rules as parse_version, so "1-2" and
"1.2.0" compare equal.
"""

from __future__ import annotations

from typing import Union

from .version import VersionValue, parse_version

VersionLike = Union[str, VersionValue]


def _coerce(version: VersionLike) -> VersionValue:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or VersionValue)
        version2: Second version (string or VersionValue)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2", "1.2.0")
        0
        >>> compare_versions("1.10", "1.9")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def version_key(version: VersionLike) -> tuple[int, int, int]:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.10.0", "1.2.0", "1.9"], key=version_key)
        ['1.2.0', '1.9', '1.10.0']
    """
    return _coerce(version).as_tuple()
