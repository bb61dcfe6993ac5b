"""Resource cache adapters."""

from tempurl.adapters.cache.file_cache import FileCache
from tempurl.adapters.cache.memory import MemoryCache
from tempurl.adapters.cache.s3 import S3Cache


__all__ = ["FileCache", "MemoryCache", "S3Cache"]
