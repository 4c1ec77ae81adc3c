"""
Resolve version requests into canonical release versions.

Implements the resolution order:
1. Literal semantic versions are normalized and returned without network access
2. Bucket-prefixed exact builds (e.g. "ci/v1.8.0-alpha.1") are returned the same way
3. Labels (e.g. "stable-1", "ci/latest") are fetched from the release bucket and
   the fetched text is resolved again
4. A missing label file (404) falls back to the running client's version

Available labels on the release bucket:
    stable      (latest stable release)
    stable-1    (latest stable release in 1.x)
    stable-1.0  (and similarly 1.1, 1.2, 1.3, ...)
    latest      (latest release, including alpha/beta)
    latest-1    (latest release in 1.x, including alpha/beta)
    latest-1.0  (and similarly 1.1, 1.2, 1.3, ...)
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from kubever.bucket import is_ci_request, split_version
from kubever.client_version import derive_fallback_version
from kubever.config import ResolverConfig
from kubever.constants import LABEL_FILE_SUFFIX
from kubever.exceptions import (
    ReleaseNotFoundException,
    ResolutionDepthExceededException,
    UnrecognizedVersionFormatException,
)
from kubever.fetcher import MetadataFetcher
from kubever.image_tag import sanitize_for_image_tag
from kubever.patterns import is_release_label, normalize_literal_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionResult:
    """Result of version resolution."""

    request: str
    """The request as supplied by the caller."""

    version: str
    """Canonical resolved version, always starting with "v"."""

    is_ci: bool = False
    """True if the request targeted a ci/ or ci-cross/ bucket."""

    fell_back: bool = False
    """True if a missing label file forced the client version fallback."""

    hops: tuple[str, ...] = field(default_factory=tuple)
    """Metadata URLs fetched, in order."""

    @property
    def image_tag(self) -> str:
        """Resolved version sanitized for use as an image tag."""
        return sanitize_for_image_tag(self.version)


@dataclass
class _Trail:
    """Per-call bookkeeping; never shared between resolutions."""

    urls: list[str] = field(default_factory=list)
    fell_back: bool = False


class VersionResolver:
    """
    Main orchestrator for version resolution.

    Holds only immutable configuration and a fetcher, so one instance can
    serve any number of independent resolutions.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        fetcher: Optional[MetadataFetcher] = None,
    ):
        self.config = config or ResolverConfig()
        self.fetcher = fetcher or MetadataFetcher(timeout=self.config.timeout)

    def resolve(self, request: str) -> str:
        """
        Resolve a request into a canonical version string.

        Args:
            request: Literal version, label, or bucket-prefixed label/version

        Returns:
            Version such as "v1.10.3"

        Raises:
            InvalidVersionFormatException: Request contains disallowed characters
            UnrecognizedVersionFormatException: Remainder is neither version nor label
            NetworkException: Metadata fetch failed for a reason other than 404
            MalformedClientVersionException: Fallback client version is unparseable
            ResolutionDepthExceededException: Labels kept pointing at labels
        """
        return self.resolve_with_details(request).version

    def resolve_with_details(self, request: str) -> ResolutionResult:
        """
        Resolve a request and report how the version was obtained.

        Raises the same exceptions as resolve().
        """
        trail = _Trail()
        version = self._resolve(request, trail)
        return ResolutionResult(
            request=request,
            version=version,
            is_ci=is_ci_request(request),
            fell_back=trail.fell_back,
            hops=tuple(trail.urls),
        )

    def is_ci_request(self, request: str) -> bool:
        """Check if the request targets a CI bucket."""
        return is_ci_request(request)

    def close(self) -> None:
        """Release the fetcher's HTTP session."""
        self.fetcher.close()

    def __enter__(self) -> "VersionResolver":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _resolve(self, request: str, trail: _Trail) -> str:
        version = normalize_literal_version(request)
        if version:
            logger.debug(f"{request!r} is a semantic version, using {version}")
            return version

        bucket_url, remainder = split_version(request, self.config.bucket_url)

        # Re-validate, in case an exact build was requested from e.g. the CI bucket
        version = normalize_literal_version(remainder)
        if version:
            logger.debug(f"{request!r} is an exact build in {bucket_url}, using {version}")
            return version

        if not is_release_label(remainder):
            raise UnrecognizedVersionFormatException(request)

        if len(trail.urls) >= self.config.max_hops:
            raise ResolutionDepthExceededException(request, self.config.max_hops)

        url = f"{bucket_url}/{remainder}{LABEL_FILE_SUFFIX}"
        trail.urls.append(url)

        try:
            body = self.fetcher.fetch(url, timeout=self.config.timeout)
        except ReleaseNotFoundException as e:
            # Air-gapped or unpublished label: use the client's own version
            logger.warning(f"Could not fetch a release version from the internet: {e}")
            body = derive_fallback_version(self.config.client_version)
            logger.warning(f"Falling back to the local client version: {body}")
            trail.fell_back = True

        logger.debug(f"Label {remainder!r} resolved to {body!r}, re-validating")
        return self._resolve(body, trail)


def resolve_version(request: str, config: Optional[ResolverConfig] = None) -> str:
    """
    Resolve a request with a freshly built resolver.

    Args:
        request: Version request, e.g. "stable-1" or "v1.10.3"
        config: Resolver configuration (defaults if omitted)

    Returns:
        Canonical version string
    """
    with VersionResolver(config) as resolver:
        return resolver.resolve(request)


__all__ = ["ResolutionResult", "VersionResolver", "resolve_version"]
