"""Tests for bucket URL derivation and CI classification."""

import pytest

from kubever.bucket import is_ci_request, split_version
from kubever.exceptions import InvalidVersionFormatException


class TestSplitVersion:
    """Tests for split_version."""

    def test_unprefixed_uses_release_bucket(self):
        """Test that unprefixed labels map to the release bucket."""
        assert split_version("stable-1") == ("https://dl.k8s.io/release", "stable-1")

    def test_release_prefix(self):
        """Test that release/ maps to the release bucket."""
        assert split_version("release/v1.7.1") == ("https://dl.k8s.io/release", "v1.7.1")

    def test_ci_prefix(self):
        """Test that ci/ is kept as the bucket path."""
        assert split_version("ci/latest-1.10") == ("https://dl.k8s.io/ci", "latest-1.10")

    def test_ci_cross_prefix_is_preserved(self):
        """Test that ci-cross/ is not collapsed into ci/."""
        assert split_version("ci-cross/latest") == ("https://dl.k8s.io/ci-cross", "latest")

    def test_custom_bucket_url(self):
        """Test that the configured bucket root is used."""
        base, remainder = split_version("latest", "https://mirror.example.com/k8s")
        assert base == "https://mirror.example.com/k8s/release"
        assert remainder == "latest"

    def test_trailing_slash_not_doubled(self):
        """Test that a trailing slash on the bucket root is not doubled."""
        base, _ = split_version("latest", "https://mirror.example.com/")
        assert base == "https://mirror.example.com/release"

    @pytest.mark.parametrize("request_str", ["!!!not-a-version", "", "foo/bar", "ci/"])
    def test_invalid_request_raises(self, request_str):
        """Test that malformed requests raise InvalidVersionFormatException."""
        with pytest.raises(InvalidVersionFormatException) as exc_info:
            split_version(request_str)
        assert exc_info.value.version == request_str


class TestIsCIRequest:
    """Tests for is_ci_request."""

    @pytest.mark.parametrize("request_str", ["ci/latest-1.8", "ci-cross/latest", "ci/v1.8.0-alpha.1"])
    def test_ci_requests(self, request_str):
        """Test that ci/ and ci-cross/ requests are CI builds."""
        assert is_ci_request(request_str) is True

    @pytest.mark.parametrize("request_str", ["stable-1.7", "release/v1.7.1", "v1.7.1", "cilatest"])
    def test_release_requests(self, request_str):
        """Test that release and unprefixed requests are not CI builds."""
        assert is_ci_request(request_str) is False

    def test_invalid_request_is_not_ci(self):
        """Test that unparseable requests are not CI builds."""
        assert is_ci_request("ci/!!!") is False

    def test_consistent_with_split_version(self):
        """Test that CI classification agrees with the bucket path."""
        for request_str in ("ci/latest", "ci-cross/latest", "release/latest", "latest"):
            base, _ = split_version(request_str)
            assert is_ci_request(request_str) == (not base.endswith("/release"))
