"""External fetcher adapters."""

from tempurl.adapters.fetchers.filesystem import FilesystemFetcher
from tempurl.adapters.fetchers.http import HttpFetcher
from tempurl.adapters.fetchers.router import create_fetcher
from tempurl.adapters.fetchers.s3 import S3Fetcher


__all__ = ["FilesystemFetcher", "HttpFetcher", "S3Fetcher", "create_fetcher"]
