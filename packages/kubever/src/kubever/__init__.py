"""kubever — resolve Kubernetes release labels into canonical versions."""

from kubever.bucket import is_ci_request, split_version
from kubever.client_version import ClientVersion, derive_fallback_version
from kubever.config import ResolverConfig, load_config
from kubever.constants import __version__
from kubever.exceptions import (
    ConfigurationException,
    InvalidVersionFormatException,
    KubeverException,
    MalformedClientVersionException,
    NetworkException,
    ReleaseNotFoundException,
    ResolutionDepthExceededException,
    UnrecognizedVersionFormatException,
)
from kubever.fetcher import MetadataFetcher
from kubever.image_tag import sanitize_for_image_tag
from kubever.resolver import ResolutionResult, VersionResolver, resolve_version

__all__ = [
    "__version__",
    "ClientVersion",
    "ConfigurationException",
    "InvalidVersionFormatException",
    "KubeverException",
    "MalformedClientVersionException",
    "MetadataFetcher",
    "NetworkException",
    "ReleaseNotFoundException",
    "ResolutionDepthExceededException",
    "ResolutionResult",
    "ResolverConfig",
    "UnrecognizedVersionFormatException",
    "VersionResolver",
    "derive_fallback_version",
    "is_ci_request",
    "load_config",
    "resolve_version",
    "sanitize_for_image_tag",
    "split_version",
]
