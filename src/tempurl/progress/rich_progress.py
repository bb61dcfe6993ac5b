"""Rich-based progress reporter for terminal output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskID,
    TextColumn,
    TransferSpeedColumn,
)


if TYPE_CHECKING:
    from types import TracebackType

    from rich.console import Console

    from tempurl.core.ports import ProgressCallback


class RichProgressReporter:
    """Progress reporter showing one bar per resource fetched from the origin.

    Totals are often unknown until the origin answers, so each bar starts
    indeterminate and picks up the total from the first progress update.

    Example:
        with RichProgressReporter() as reporter:
            service = TemporaryUrlService(..., progress=reporter)
            link = service.temporary_url("videos/intro.mp4")
    """

    def __init__(self, console: Console | None = None, transient: bool = True) -> None:
        """Initialize the progress display.

        Args:
            console: Optional Rich console to render to.
            transient: Remove finished bars when the display stops.
        """
        self._progress = Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=console,
            transient=transient,
        )
        self._tasks: dict[str, list[TaskID]] = {}
        self._started = False

    def __enter__(self) -> RichProgressReporter:
        """Start the progress display."""
        self._ensure_started()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Stop the progress display."""
        self._progress.stop()
        self._started = False

    def _ensure_started(self) -> None:
        if not self._started:
            self._progress.start()
            self._started = True

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Start tracking a fetch.

        Args:
            name: Logical path being fetched.
            total: Expected bytes, or 0 when unknown.

        Returns:
            A callback to update progress.
        """
        self._ensure_started()

        task_id = self._progress.add_task(name, total=total or None)
        self._tasks.setdefault(name, []).append(task_id)

        def callback(received: int, expected: int) -> None:
            self._progress.update(task_id, completed=received, total=expected or None)

        return callback

    def finish_task(self, name: str) -> None:
        """Mark a fetch as complete, whether or not it succeeded.

        Args:
            name: The logical path passed to start_task().
        """
        pending = self._tasks.get(name)
        if not pending:
            return
        task_id = pending.pop(0)
        if not pending:
            del self._tasks[name]
        task = self._progress.tasks[task_id]
        self._progress.update(task_id, total=task.completed, completed=task.completed)
