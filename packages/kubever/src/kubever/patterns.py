"""
Pattern rules for classifying version requests.

All rules match the whole string and use ASCII character classes, so
``\\w`` never admits non-ASCII letters.
"""

from __future__ import annotations

import re

# Semantic version with optional "v" and an arbitrary pre-release/build suffix
RELEASE_VERSION_PATTERN = re.compile(
    r"v?(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)([-0-9a-zA-Z_.+]*)?",
    re.ASCII,
)

# Labels such as: stable, latest, stable-1, latest-1.10
RELEASE_LABEL_PATTERN = re.compile(r"[a-z]+(-[-\w.]+)?", re.ASCII)

# Optional bucket prefix followed by the label or version
BUCKET_PREFIX_PATTERN = re.compile(
    r"((?P<prefix>release|ci|ci-cross)/)?(?P<remainder>[-\w.+]+)",
    re.ASCII,
)


def is_literal_version(value: str) -> bool:
    """Check if a string is already a fully specified version."""
    return RELEASE_VERSION_PATTERN.fullmatch(value) is not None


def is_release_label(value: str) -> bool:
    """Check if a string is a symbolic label worth fetching."""
    return RELEASE_LABEL_PATTERN.fullmatch(value) is not None


def match_bucket_prefix(value: str) -> tuple[str | None, str] | None:
    """
    Split a request into its bucket prefix and remainder.

    Args:
        value: Raw request, e.g. "ci/latest-1.10" or "stable"

    Returns:
        (prefix, remainder) where prefix is None for unprefixed input,
        or None if the request contains disallowed characters
    """
    match = BUCKET_PREFIX_PATTERN.fullmatch(value)
    if match is None:
        return None
    return match.group("prefix"), match.group("remainder")


def normalize_literal_version(value: str) -> str | None:
    """
    Return a literal version with a guaranteed leading "v".

    Args:
        value: Candidate version string

    Returns:
        Normalized version, or None if value is not a literal version
    """
    if not is_literal_version(value):
        return None
    if value.startswith("v"):
        return value
    return "v" + value


__all__ = [
    "RELEASE_VERSION_PATTERN",
    "RELEASE_LABEL_PATTERN",
    "BUCKET_PREFIX_PATTERN",
    "is_literal_version",
    "is_release_label",
    "match_bucket_prefix",
    "normalize_literal_version",
]
