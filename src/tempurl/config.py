"""Configuration for tempurl.

Configuration is programmatic: build a ServiceConfig in code and pass it
to TemporaryUrlService.from_config().
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tempurl.core.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Settings for a TemporaryUrlService wired with default adapters.

    Attributes:
        origin: Base address resources are fetched from (http(s)://, s3://,
            file:// or a local directory).
        link_base_url: Address that serves cached resources; issued links
            start with it.
        secret: Key used to sign links.
        cache_dir: Cache directory, relative to the project root or absolute.
        default_expiry: Link lifetime in seconds.
        fetch_timeout: HTTP request timeout in seconds.
        fetch_attempts: Total attempts per HTTP fetch (1 means no retries).

    Example:
        >>> config = ServiceConfig(
        ...     origin="https://images.example.com",
        ...     link_base_url="https://app.example.com/files",
        ...     secret="change-me",
        ... )
    """

    origin: str
    link_base_url: str
    secret: str
    cache_dir: Path | str = "data/tempurl"
    default_expiry: int = 3600
    fetch_timeout: float = 10.0
    fetch_attempts: int = 1

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.origin:
            raise ConfigurationError("origin cannot be empty")
        if not self.link_base_url:
            raise ConfigurationError("link_base_url cannot be empty")
        if not self.secret:
            raise ConfigurationError("secret cannot be empty")
        if self.default_expiry <= 0:
            raise ConfigurationError("default_expiry must be positive")
        if self.fetch_timeout <= 0:
            raise ConfigurationError("fetch_timeout must be positive")
        if self.fetch_attempts < 1:
            raise ConfigurationError("fetch_attempts must be at least 1")


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. .tempurl - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.
    """
    if start is None:
        start = Path.cwd()

    markers = [".tempurl", "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return current
