"""Logical path normalization and address construction.

A logical path identifies a resource independently of where it is stored.
Every component receives the normalized form, so the same resource maps to
the same cache key, origin address, and link.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from tempurl.core.exceptions import InvalidPathError


_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Normalize a caller-supplied resource path.

    Backslashes become forward slashes, repeated slashes collapse, and
    leading/trailing slashes and whitespace are removed. Normalizing an
    already normalized path returns it unchanged.

    Args:
        path: Raw path, e.g. "/images//logo.png".

    Returns:
        Normalized path, e.g. "images/logo.png".

    Raises:
        InvalidPathError: If the path is empty or contains "." or ".." segments.
    """
    cleaned = _REPEATED_SLASHES.sub("/", path.strip().replace("\\", "/")).strip("/")
    if not cleaned:
        raise InvalidPathError(path, "path is empty")

    if any(segment in (".", "..") for segment in cleaned.split("/")):
        raise InvalidPathError(path, "relative segments are not allowed")

    return cleaned


def quote_path(path: str) -> str:
    """Percent-encode a normalized path for use in a URL, keeping slashes."""
    return quote(path, safe="/")


def join_url(base: str, path: str) -> str:
    """Join a base address and a normalized path with exactly one slash.

    Args:
        base: Base address, e.g. "https://cdn.example.com/assets/".
        path: Normalized logical path.

    Returns:
        The combined address, e.g. "https://cdn.example.com/assets/logo.png".
    """
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
