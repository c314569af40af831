# SPDX-License-Identifier: MIT
"""Three-component version values.

Text form is MAJOR[.MINOR[.PATCH]] where '.' and '-' both separate components:
- Missing components default to 0: "1.2" -> 1.2.0
- Negative components are clamped to 0: "1.-2.3" -> 1.0.3
- A single trailing delimiter is tolerated: "1.2." -> 1.2.0
- Leading delimiters, empty fields and a fourth component are rejected
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Characters separating components in text form
DELIMITERS = (".", "-")

MAX_COMPONENTS = 3

# Text fields must fit a signed 32-bit integer. The numeric constructor has
# no upper bound, so larger components render to text that parse rejects.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Significant digits in INT_MIN and INT_MAX
_MAX_DIGITS = 10

_COMPONENT_NAMES = ("major", "minor", "patch")

_INTEGER_PATTERN = re.compile(r"(?P<sign>[+-]?)0*(?P<digits>[0-9]+)")

# '.' always splits; '-' splits only when it follows a component character,
# otherwise it is the sign of the next field.
_SPLIT_PATTERN = re.compile(r"\.|(?<=[^.\-])-")


class VersionError(ValueError):
    """Base class for version construction errors."""

    pass


class MalformedVersionError(VersionError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version format: {version!r}"
        super().__init__(self.message)


class ComponentOutOfRangeError(VersionError):
    """Raised when a numeric version component is negative."""

    def __init__(self, component: str, value: int):
        self.component = component
        self.value = value
        self.message = f"{component.capitalize()} version cannot be negative: {value}"
        super().__init__(self.message)


def try_parse_int(text: str) -> tuple[bool, int]:
    """Parse an optionally signed base-10 integer without raising.

    Only ASCII digits are accepted; surrounding or embedded whitespace,
    underscores and values outside the signed 32-bit range all fail.

    Returns:
        (True, value) on success, (False, 0) otherwise

    Examples:
        >>> try_parse_int("-42")
        (True, -42)
        >>> try_parse_int("")
        (False, 0)
    """
    if not isinstance(text, str):
        return False, 0
    match = _INTEGER_PATTERN.fullmatch(text)
    if match is None or len(match.group("digits")) > _MAX_DIGITS:
        return False, 0
    value = int(match.group("sign") + match.group("digits"))
    if not INT_MIN <= value <= INT_MAX:
        return False, 0
    return True, value


def split_fields(text: str) -> list[str]:
    """Split version text into its raw component fields.

    Empty fields are preserved except for a single trailing one, so
    "1.2." gives ["1", "2"] while ".1" gives ["", "1"].
    """
    fields = _SPLIT_PATTERN.split(text)
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


@dataclass(frozen=True, order=True, slots=True)
class VersionValue:
    """An immutable MAJOR.MINOR.PATCH version.

    Instances compare and hash by (major, minor, patch) and every component
    is non-negative whichever way the value was built. Components above
    INT_MAX are accepted here, but their text form does not parse back.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in _COMPONENT_NAMES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{name} must be an int, got {type(value).__name__}"
                )
            if value < 0:
                raise ComponentOutOfRangeError(name, value)

    @classmethod
    def parse(cls, version_string: str) -> VersionValue:
        """Parse a version string, normalizing missing or negative parts to 0.

        Args:
            version_string: Text such as "1.2.3", "1-2-3" or " 1.2 "

        Returns:
            A VersionValue with all components >= 0

        Raises:
            MalformedVersionError: If the string is empty, has an empty or
                non-integer field, or has more than three fields

        Examples:
            >>> VersionValue.parse("1.2")
            VersionValue(major=1, minor=2, patch=0)
            >>> VersionValue.parse("-1.2.3")
            VersionValue(major=0, minor=2, patch=3)
        """
        if not isinstance(version_string, str):
            raise MalformedVersionError(
                version_string,
                f"Version must be a string, got {type(version_string).__name__}",
            )

        text = version_string.strip()
        if not text:
            raise MalformedVersionError(
                version_string, "Version string cannot be null or empty"
            )

        fields = split_fields(text)
        if not fields or len(fields) > MAX_COMPONENTS:
            raise MalformedVersionError(version_string)

        numbers = []
        for field_text in fields:
            ok, number = try_parse_int(field_text)
            if not ok:
                raise MalformedVersionError(version_string)
            numbers.append(number)

        components = []
        for index, name in enumerate(_COMPONENT_NAMES):
            number = numbers[index] if index < len(numbers) else 0
            if number < 0:
                logger.debug(
                    "Clamping negative %s component %d to 0 in %r",
                    name,
                    number,
                    version_string,
                )
                number = 0
            components.append(number)

        return cls(*components)

    def as_tuple(self) -> tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version_string: str) -> VersionValue:
    """Parse a version string into a VersionValue.

    Thin wrapper over VersionValue.parse.

    Raises:
        MalformedVersionError: If the string is not a valid version
    """
    return VersionValue.parse(version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.2.")
        True
        >>> is_valid_version(".1.2")
        False
    """
    try:
        VersionValue.parse(version_string)
    except MalformedVersionError:
        return False
    return True
