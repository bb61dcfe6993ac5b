"""File-based cache adapter implementing ResourceCachePort."""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path

from tempurl.core.exceptions import CacheError, CacheMissError, CacheWriteError
from tempurl.core.models import CacheStatistics


# On-disk suffixes. Directories and entries never share a name, so a path
# and paths nested under it ("images", "images/logo.png") can coexist.
_DIR_SUFFIX = ".d"
_ENTRY_SUFFIX = ".entry"

# In-flight writes; the suffix keeps them apart from entries
_TMP_PREFIX = ".tmp-"
_TMP_SUFFIX = ".part"


class FileCache:
    """Local file cache storing one file per logical path.

    Each path segment but the last becomes a directory named "<segment>.d"
    and the last becomes a file named "<segment>.entry", so "images/logo.png"
    is stored at cache_dir/images.d/logo.png.entry. Content is written to a
    temporary file in the target directory and renamed into place, so
    readers never see partial writes.

    Attributes:
        cache_dir: Directory where cached files are stored.
    """

    def __init__(self, cache_dir: Path) -> None:
        """Initialize the cache with a directory path.

        Args:
            cache_dir: Directory where cached files will be stored. Created
                on first write.
        """
        self.cache_dir = Path(cache_dir)

    def _file_path(self, path: str) -> Path:
        """Get the file location for a logical path."""
        *parents, name = path.split("/")
        directory = self.cache_dir.joinpath(*(p + _DIR_SUFFIX for p in parents))
        return directory / (name + _ENTRY_SUFFIX)

    def _logical_path(self, file_path: Path) -> str:
        *parents, name = file_path.relative_to(self.cache_dir).parts
        segments = [p.removesuffix(_DIR_SUFFIX) for p in parents]
        return "/".join([*segments, name.removesuffix(_ENTRY_SUFFIX)])

    def exists(self, path: str) -> bool:
        """Check whether a file is cached for path."""
        return self._file_path(path).is_file()

    def get(self, path: str) -> bytes:
        """Read cached content.

        Raises:
            CacheMissError: If nothing is cached for path.
            CacheError: If the cached file exists but cannot be read.
        """
        file_path = self._file_path(path)
        try:
            return file_path.read_bytes()
        except (FileNotFoundError, IsADirectoryError):
            raise CacheMissError(path) from None
        except OSError as e:
            raise CacheError(f"Could not read cached '{path}': {e}") from e

    def put(self, path: str, content: bytes) -> None:
        """Atomically store content for path, replacing any previous file.

        Raises:
            CacheWriteError: If the file could not be written.
        """
        file_path = self._file_path(path)
        tmp_name: str | None = None
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=_TMP_PREFIX, suffix=_TMP_SUFFIX, dir=file_path.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(tmp_name, file_path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise CacheWriteError(path, cause=e) from e

    def invalidate(self, path: str) -> None:
        """Remove a cached file, cleaning up empty parent directories."""
        file_path = self._file_path(path)
        file_path.unlink(missing_ok=True)
        self._cleanup_empty_dirs(file_path.parent)

    def _cleanup_empty_dirs(self, path: Path) -> None:
        """Remove empty directories recursively up to cache_dir."""
        try:
            while path != self.cache_dir and path.is_dir():
                if any(path.iterdir()):
                    break
                path.rmdir()
                path = path.parent
        except OSError:
            pass  # Directory not empty or in use

    def _entries(self) -> list[Path]:
        if not self.cache_dir.exists():
            return []
        return [
            p
            for p in self.cache_dir.rglob("*")
            if p.is_file() and p.name.endswith(_ENTRY_SUFFIX)
        ]

    def list_all_keys(self) -> list[str]:
        """List all cached logical paths, sorted alphabetically."""
        return sorted(self._logical_path(p) for p in self._entries())

    def statistics(self) -> CacheStatistics:
        """Count cached files and their combined size in bytes."""
        total_size = 0
        entry_count = 0
        for file_path in self._entries():
            with contextlib.suppress(OSError):
                total_size += file_path.stat().st_size
                entry_count += 1
        return CacheStatistics(entry_count=entry_count, total_size=total_size)
