"""Filesystem fetcher adapter for origins on local or mounted disks."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from tempurl.core.exceptions import FetchError


if TYPE_CHECKING:
    from tempurl.core.ports import ProgressCallback


# Chunk size for reading files (64KB)
_CHUNK_SIZE = 64 * 1024


class FilesystemFetcher:
    """Fetcher reading resources from a base directory.

    Implements FetcherPort for local development and testing without a
    network origin.
    """

    def __init__(self, base_dir: Path | str) -> None:
        """Initialize the fetcher.

        Args:
            base_dir: Directory the logical path is joined onto.
        """
        self.base_dir = Path(base_dir)

    def fetch(self, path: str, progress: ProgressCallback | None = None) -> bytes:
        """Read a resource from base_dir / path with progress reporting.

        Raises:
            FetchError: If the file does not exist or cannot be read.
        """
        source_path = self.base_dir / path
        try:
            total_size = source_path.stat().st_size
            chunks: list[bytes] = []
            bytes_read = 0
            with source_path.open("rb") as src:
                for chunk in iter(lambda: src.read(_CHUNK_SIZE), b""):
                    chunks.append(chunk)
                    bytes_read += len(chunk)
                    if progress:
                        progress(bytes_read, total_size)
        except OSError as e:
            raise FetchError(
                f"Could not read {source_path}: {e}",
                path=path,
                source=str(source_path),
                cause=e,
            ) from e

        return b"".join(chunks)
