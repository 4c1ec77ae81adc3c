"""Map version requests onto release bucket locations."""

from __future__ import annotations

from kubever.constants import CI_BUCKET_PREFIX, DEFAULT_BUCKET_URL, RELEASE_BUCKET
from kubever.exceptions import InvalidVersionFormatException
from kubever.patterns import match_bucket_prefix


def split_version(request: str, bucket_url: str = DEFAULT_BUCKET_URL) -> tuple[str, str]:
    """
    Split a request into the bucket base URL and the label or version.

    The ci/ and ci-cross/ prefixes are kept as the bucket path; anything
    else, including no prefix at all, maps to the release bucket.

    Args:
        request: Raw request such as "ci-cross/latest" or "stable-1"
        bucket_url: Root of the release bucket

    Returns:
        Tuple of (fetch base URL, remainder)

    Raises:
        InvalidVersionFormatException: If the request does not match the bucket pattern

    Examples:
        >>> split_version("ci/latest-1.10")
        ('https://dl.k8s.io/ci', 'latest-1.10')
        >>> split_version("stable")
        ('https://dl.k8s.io/release', 'stable')
    """
    parts = match_bucket_prefix(request)
    if parts is None:
        raise InvalidVersionFormatException(request)

    prefix, remainder = parts
    if prefix and prefix.startswith(CI_BUCKET_PREFIX):
        segment = prefix
    else:
        segment = RELEASE_BUCKET

    return f"{bucket_url.rstrip('/')}/{segment}", remainder


def is_ci_request(request: str) -> bool:
    """Check if the request targets a CI bucket (ci/ or ci-cross/)."""
    parts = match_bucket_prefix(request)
    if parts is None:
        return False
    prefix, _ = parts
    return bool(prefix) and prefix.startswith(CI_BUCKET_PREFIX)


__all__ = ["split_version", "is_ci_request"]
