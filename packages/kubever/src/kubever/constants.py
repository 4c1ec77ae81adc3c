"""
Centralized configuration constants for kubever.

Single source of truth for defaults shared by the resolver, the fetcher
and the command line.
"""

from pathlib import Path

__version__ = "0.3.0"

# ============================================================================
# Release Bucket
# ============================================================================

DEFAULT_BUCKET_URL = "https://dl.k8s.io"
"""Root of the release bucket that serves <bucket>/<label>.txt files."""

RELEASE_BUCKET = "release"
"""Path segment used for unprefixed and release/ requests."""

CI_BUCKET_PREFIX = "ci"
"""Bucket prefixes starting with this string (ci, ci-cross) are CI builds."""

LABEL_FILE_SUFFIX = ".txt"
"""Suffix of the plain-text metadata file naming a resolved version."""

# ============================================================================
# Resolution Policy
# ============================================================================

FETCH_TIMEOUT_SECONDS = 10.0
"""Timeout for a single metadata file fetch."""

MAX_RESOLUTION_HOPS = 5
"""Maximum number of label hops before resolution is aborted."""

DEFAULT_CLIENT_VERSION = f"v{__version__}"
"""Version used for offline fallback when no client version is configured."""

# ============================================================================
# Paths
# ============================================================================

CONFIG_FILE = Path.home() / ".config" / "kubever" / "config.yaml"
"""Default configuration file read by the command line."""
