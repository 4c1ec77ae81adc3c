"""Convert version strings into valid container image tag components."""

import re

# Image tags may only contain letters, digits, underscores, periods and dashes
_DISALLOWED_TAG_CHARS = re.compile(r"[^-a-zA-Z0-9_.]")


def sanitize_for_image_tag(version: str) -> str:
    """
    Replace every character not allowed in an image tag with "_".

    CI versions carry "+" build metadata; everything else they contain is
    already legal, but the input is not assumed to be pre-validated.

    Examples:
        >>> sanitize_for_image_tag("v1.10.0-alpha.0.1+a6f8")
        'v1.10.0-alpha.0.1_a6f8'
    """
    return _DISALLOWED_TAG_CHARS.sub("_", version)


__all__ = ["sanitize_for_image_tag"]
