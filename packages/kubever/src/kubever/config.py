"""Resolver configuration: built once, then passed to the resolver."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from kubever.constants import (
    CONFIG_FILE,
    DEFAULT_BUCKET_URL,
    DEFAULT_CLIENT_VERSION,
    FETCH_TIMEOUT_SECONDS,
    MAX_RESOLUTION_HOPS,
)
from kubever.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable settings for version resolution.

    Attributes:
        bucket_url: Root URL of the release bucket.
        timeout: Seconds allowed for each metadata fetch.
        max_hops: Label hops allowed before resolution is aborted.
        client_version: Semantic version of the running client, used as the
                        offline fallback when a label file is missing.
    """

    bucket_url: str = DEFAULT_BUCKET_URL
    timeout: float = FETCH_TIMEOUT_SECONDS
    max_hops: int = MAX_RESOLUTION_HOPS
    client_version: str = DEFAULT_CLIENT_VERSION

    def __post_init__(self) -> None:
        if not self.bucket_url or not self.bucket_url.startswith(("http://", "https://")):
            raise ConfigurationException(
                f"must be an http(s) URL, got {self.bucket_url!r}", "bucket_url"
            )
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigurationException(
                f"must be a finite number > 0, got {self.timeout}", "timeout"
            )
        if self.max_hops < 1:
            raise ConfigurationException(f"must be >= 1, got {self.max_hops}", "max_hops")
        if not self.client_version:
            raise ConfigurationException("cannot be empty", "client_version")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ResolverConfig:
        """Build a config from a dict, ignoring unknown keys.

        Raises:
            ConfigurationException: If a value has the wrong type.
        """
        kwargs: dict[str, Any] = {}

        if data.get("bucket_url") is not None:
            kwargs["bucket_url"] = _coerce(data["bucket_url"], str, "bucket_url")
        if data.get("timeout") is not None:
            kwargs["timeout"] = _coerce(data["timeout"], float, "timeout")
        if data.get("max_hops") is not None:
            kwargs["max_hops"] = _coerce(data["max_hops"], int, "max_hops")
        if data.get("client_version") is not None:
            kwargs["client_version"] = _coerce(data["client_version"], str, "client_version")

        return cls(**kwargs)


def _coerce(value: Any, kind: type, field_name: str) -> Any:
    if isinstance(value, bool) or isinstance(value, (list, dict)):
        raise ConfigurationException(f"invalid value {value!r}", field_name)
    # int() would silently truncate 2.9 to 2
    if kind is int and isinstance(value, float) and not value.is_integer():
        raise ConfigurationException(f"must be a whole number, got {value!r}", field_name)
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationException(f"invalid value {value!r}", field_name) from e


def load_config(path: Path | None = None) -> ResolverConfig:
    """Load resolver config from YAML, falling back to defaults.

    Args:
        path: Config file (default: ~/.config/kubever/config.yaml).

    Returns:
        ResolverConfig. A missing default file, or an unreadable or malformed
        file, yields defaults.

    Raises:
        ConfigurationException: If an explicitly given file does not exist, or
            the file parses but holds invalid values.
    """
    if path is not None and not path.exists():
        raise ConfigurationException(f"config file not found: {path}", "config")

    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return ResolverConfig()

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return ResolverConfig()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        return ResolverConfig()

    logger.debug(f"Loaded config from {config_path}")
    return ResolverConfig.from_mapping(data)


__all__ = ["ResolverConfig", "load_config"]
