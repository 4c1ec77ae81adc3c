"""Tests for version request pattern rules."""

import pytest

from kubever.patterns import (
    is_literal_version,
    is_release_label,
    match_bucket_prefix,
    normalize_literal_version,
)


class TestLiteralVersion:
    """Tests for the literal semantic version rule."""

    @pytest.mark.parametrize(
        "value",
        [
            "v1.2.3",
            "1.2.3",
            "v0.0.0",
            "v1.10.0-alpha.0.1234+abcdef",
            "1.8.0-beta.1",
            "v1.7.1+build_7",
        ],
    )
    def test_matches_versions(self, value):
        """Test that semantic versions with optional suffixes match."""
        assert is_literal_version(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "v01.2.3",
            "1.02.3",
            "1.2",
            "stable",
            "ci/v1.2.3",
            "V1.2.3",
            "v1.2.3 ",
            "v1.2.3\n",
            "",
        ],
    )
    def test_rejects_non_versions(self, value):
        """Test that labels, prefixed and zero-padded inputs don't match."""
        assert is_literal_version(value) is False

    def test_normalize_adds_v_prefix(self):
        """Test that a missing "v" is prepended."""
        assert normalize_literal_version("1.2.3") == "v1.2.3"

    def test_normalize_keeps_existing_prefix(self):
        """Test that canonical versions are returned unchanged."""
        assert normalize_literal_version("v1.10.3-rc.1") == "v1.10.3-rc.1"

    def test_normalize_non_version_returns_none(self):
        """Test that labels normalize to None."""
        assert normalize_literal_version("latest") is None


class TestReleaseLabel:
    """Tests for the release label rule."""

    @pytest.mark.parametrize("value", ["stable", "latest", "stable-1", "latest-1.10", "k-8_s.x"])
    def test_matches_labels(self, value):
        """Test that lowercase labels with optional suffixes match."""
        assert is_release_label(value) is True

    @pytest.mark.parametrize("value", ["Stable", "1stable", "stable-", "-stable", "stäble", ""])
    def test_rejects_non_labels(self, value):
        """Test that capitalized, numeric-led and non-ASCII inputs don't match."""
        assert is_release_label(value) is False


class TestBucketPrefix:
    """Tests for the bucket prefix rule."""

    def test_unprefixed(self):
        """Test that unprefixed input has no prefix."""
        assert match_bucket_prefix("stable-1") == (None, "stable-1")

    @pytest.mark.parametrize("prefix", ["release", "ci", "ci-cross"])
    def test_known_prefixes(self, prefix):
        """Test that each known prefix is captured."""
        assert match_bucket_prefix(f"{prefix}/latest") == (prefix, "latest")

    def test_unknown_prefix_rejected(self):
        """Test that unknown prefixes don't match (slash is not allowed)."""
        assert match_bucket_prefix("nightly/latest") is None

    def test_invalid_characters_rejected(self):
        """Test that disallowed characters don't match."""
        assert match_bucket_prefix("!!!not-a-version") is None
        assert match_bucket_prefix("") is None

    def test_build_metadata_allowed(self):
        """Test that "+" is allowed in the remainder."""
        assert match_bucket_prefix("ci/v1.9.0-alpha.1+abc") == ("ci", "v1.9.0-alpha.1+abc")
