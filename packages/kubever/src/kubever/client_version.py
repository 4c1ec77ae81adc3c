"""
Derive an offline fallback version from the running client's version.

Client builds report versions such as ``v1.9.0-alpha.0.1234+abcdef``. The
fallback keeps the release label down to e.g. ``alpha.0`` and drops the
commit offset and build metadata so the result is usable as an image tag.
"""

import re
from dataclasses import dataclass
from typing import Optional

from kubever.exceptions import MalformedClientVersionException

_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

SEMVER_PATTERN = re.compile(
    r"v?(?P<major>0|[1-9][0-9]*)\.(?P<minor>0|[1-9][0-9]*)\.(?P<patch>0|[1-9][0-9]*)"
    rf"(?:-(?P<prerelease>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{_IDENTIFIERS}))?",
    re.ASCII,
)


@dataclass(frozen=True)
class ClientVersion:
    """
    Strict semantic version of a client build.

    Supports parsing versions like:
    - v1.9.0
    - 1.9.0-beta
    - v1.9.0-alpha.0.1234+abcdef
    """
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, version_str: str) -> Optional["ClientVersion"]:
        """
        Parse a version string into a ClientVersion.

        Args:
            version_str: Semantic version, optionally prefixed with "v"

        Returns:
            ClientVersion or None if parsing fails
        """
        if not version_str or not version_str.strip():
            return None

        match = SEMVER_PATTERN.fullmatch(version_str.strip())
        if not match:
            return None

        prerelease = match.group("prerelease")
        build = match.group("build")

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    def without_metadata(self) -> str:
        """
        Format the version for use as a fallback release.

        Keeps at most two pre-release segments (label and one numeric
        qualifier), pads a lone label with ".0", and drops build metadata.
        """
        pre = ""
        if self.prerelease:
            label = self.prerelease[0]
            qualifier = self.prerelease[1] if len(self.prerelease) > 1 else "0"
            pre = f"-{label}.{qualifier}"
        return f"v{self.major}.{self.minor}.{self.patch}{pre}"

    def __str__(self) -> str:
        version = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version


def derive_fallback_version(build_info: str) -> str:
    """
    Return the client version without offsets and build metadata.

    Args:
        build_info: Client version, e.g. "v1.9.0-alpha.0.1234+abcdef"

    Returns:
        Fallback version, e.g. "v1.9.0-alpha.0"

    Raises:
        MalformedClientVersionException: If build_info is not a semantic version

    Examples:
        >>> derive_fallback_version("v1.9.0-alpha.0.1234+sha.abc")
        'v1.9.0-alpha.0'
        >>> derive_fallback_version("v1.9.0-beta+meta")
        'v1.9.0-beta.0'
    """
    version = ClientVersion.parse(build_info)
    if version is None:
        raise MalformedClientVersionException(build_info)
    return version.without_metadata()


__all__ = ["ClientVersion", "SEMVER_PATTERN", "derive_fallback_version"]
