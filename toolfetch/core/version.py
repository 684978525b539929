"""
Semantic version parsing and ordering.

Versions follow the semver.org 2.0.0 grammar strictly: three numeric
components without leading zeros, an optional dot-separated pre-release and
optional build metadata. Build metadata never takes part in comparisons.

Parsing and precedence come from the `semver` package; this module narrows
its input to plain ASCII strings and maps failures to InvalidVersionError.

Usage:
    from toolfetch.core.version import Version

    version = Version.parse("0.9.1")
    if version >= Version.parse("0.9.0"):
        print(f"Compatible: {version}")
"""

from typing import Optional, Union

import semver

from toolfetch.core.exceptions import InvalidVersionError


class Version(semver.Version):
    """
    Semantic version with optional pre-release and build metadata.

    Attributes:
        major: Major version (incompatible changes)
        minor: Minor version (compatible additions)
        patch: Patch version (compatible fixes)
        prerelease: Pre-release string (e.g., 'rc.1') or None
        build: Build metadata string or None
    """

    @classmethod
    def parse(cls, text: str, optional_minor_and_patch: bool = False) -> "Version":
        """
        Parse a strict semantic version string.

        Args:
            text: Version string such as '1.2.3' or '1.0.0-rc.1+build.5'
            optional_minor_and_patch: Must stay False; accepted so the
                signature matches semver.Version.parse

        Returns:
            Parsed Version

        Raises:
            InvalidVersionError: If text is not a valid semantic version

        Example:
            >>> Version.parse("2.1.0")
            Version(major=2, minor=1, patch=0, prerelease=None, build=None)
        """
        # semver's pattern ends in `$` and uses unicode `\d`
        if not isinstance(text, str) or not text.isascii() or text != text.strip():
            raise InvalidVersionError(str(text))

        try:
            return super().parse(text, optional_minor_and_patch=False)
        except (TypeError, ValueError) as e:
            raise InvalidVersionError(text) from e

    @classmethod
    def try_parse(cls, text: str) -> Optional["Version"]:
        """Parse text, returning None instead of raising on bad input."""
        try:
            return cls.parse(text)
        except InvalidVersionError:
            return None


def coerce_version(version: Union[str, Version]) -> Version:
    """
    Accept either a Version or a version string.

    Raises:
        InvalidVersionError: If a string does not parse
    """
    if isinstance(version, Version):
        return version
    return Version.parse(version)


__all__ = ["Version", "coerce_version"]
