"""Core domain module for tempurl.

This module contains pure Python domain models and port definitions.
It has no I/O dependencies and can be tested in isolation.
"""

from tempurl.core.models import CacheStatistics, ExpiringLink
from tempurl.core.ports import (
    ClockPort,
    FetcherPort,
    LinkIssuerPort,
    ProgressCallback,
    ResourceCachePort,
)


__all__ = [
    "CacheStatistics",
    "ClockPort",
    "ExpiringLink",
    "FetcherPort",
    "LinkIssuerPort",
    "ProgressCallback",
    "ResourceCachePort",
]
