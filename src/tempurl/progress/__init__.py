"""Progress reporting adapters."""

from tempurl.progress.rich_progress import RichProgressReporter


__all__ = ["RichProgressReporter"]
