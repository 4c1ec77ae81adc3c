"""Exception hierarchy for version resolution."""

from __future__ import annotations


class KubeverException(Exception):
    """Base class for every error raised by kubever."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidVersionFormatException(KubeverException):
    """Request does not match the bucket-prefix pattern."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"invalid version {version!r}")


class UnrecognizedVersionFormatException(KubeverException):
    """Request is neither a semantic version nor a release label."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"version {version!r} doesn't match patterns for neither semantic "
            "version nor labels (stable, latest, ...)"
        )


class NetworkException(KubeverException):
    """Fetching release metadata failed.

    Attributes:
        url: URL that was being fetched.
        status_code: HTTP status, or None for connection-level failures.
    """

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ReleaseNotFoundException(NetworkException):
    """The metadata file is missing on the release server (HTTP 404)."""


class MalformedClientVersionException(KubeverException):
    """The running client's version is not a parseable semantic version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"client version error: {version!r} is not a semantic version")


class ResolutionDepthExceededException(KubeverException):
    """A label kept resolving to other labels past the hop limit."""

    def __init__(self, version: str, max_hops: int):
        self.version = version
        self.max_hops = max_hops
        super().__init__(
            f"version {version!r} did not resolve to a semantic version "
            f"within {max_hops} hops"
        )


class ConfigurationException(KubeverException):
    """Invalid resolver configuration value."""

    def __init__(self, message: str, field: str):
        self.field = field
        super().__init__(f"{field}: {message}")


__all__ = [
    "KubeverException",
    "InvalidVersionFormatException",
    "UnrecognizedVersionFormatException",
    "NetworkException",
    "ReleaseNotFoundException",
    "MalformedClientVersionException",
    "ResolutionDepthExceededException",
    "ConfigurationException",
]
