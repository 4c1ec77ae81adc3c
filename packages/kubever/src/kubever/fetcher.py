"""
Fetch release metadata files from the release bucket.

A metadata file is a small plain-text document such as
``https://dl.k8s.io/release/stable-1.txt`` whose body names a version.
"""

import logging
from typing import Optional

import requests

from kubever.constants import FETCH_TIMEOUT_SECONDS
from kubever.exceptions import NetworkException, ReleaseNotFoundException

logger = logging.getLogger(__name__)


class MetadataFetcher:
    """
    Single-shot HTTP client for release metadata files.

    Uses a requests Session for connection pooling. Every fetch is
    independent: there is no caching and no retry.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = FETCH_TIMEOUT_SECONDS,
    ):
        """
        Initialize the fetcher.

        Args:
            session: Session to reuse (a new one is created if omitted)
            timeout: Default timeout in seconds for each fetch
        """
        self._session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, url: str, timeout: Optional[float] = None) -> str:
        """
        Fetch a metadata file and return its trimmed body.

        Args:
            url: Full URL of the .txt file
            timeout: Override for the default timeout

        Returns:
            Response body with surrounding whitespace stripped

        Raises:
            ReleaseNotFoundException: If the server answers 404
            NetworkException: On any other status or transport failure
        """
        effective_timeout = self.timeout if timeout is None else timeout
        logger.debug(f"Fetching release version from URL: {url}")

        try:
            with self._session.get(url, timeout=effective_timeout) as response:
                if response.status_code != 200:
                    message = (
                        f"unable to fetch file. URL: {url!r}, "
                        f"status: {response.status_code} {response.reason}"
                    )
                    # 404 means the label file is missing on the server
                    if response.status_code == 404:
                        raise ReleaseNotFoundException(url, message, status_code=404)
                    raise NetworkException(url, message, status_code=response.status_code)

                return response.text.strip()

        except requests.RequestException as e:
            raise NetworkException(url, f"unable to get URL {url!r}: {e}") from e

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()


__all__ = ["MetadataFetcher"]
