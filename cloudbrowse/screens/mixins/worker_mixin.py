"""WorkerMixin - Worker lifecycle management for effect jobs.

This module provides a mixin class that implements consistent patterns for:
- Running effect jobs in background Textual Workers
- Posting each job's result back to the screen as a Textual message
- Tracking the number of jobs in flight (reactive ``pending_jobs``)
- Logging worker state changes with their duration

Jobs are started non-exclusive by default: navigating away from the view
that emitted an effect never cancels the job, and its result is delivered
to whichever view is active when it arrives.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

from cloudbrowse.views import signals

logger = logging.getLogger(__name__)


# ============================================================================
# Messages for Worker Communication
# ============================================================================


class EffectResult(Message):
    """A job finished and produced a view message.

    Attributes:
        result: The message to dispatch to the active view.
        duration_ms: Time the job took in milliseconds.
    """

    def __init__(self, result: signals.Message, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.result = result
        self.duration_ms = duration_ms


class JobCrashed(Message):
    """A job raised instead of returning a message.

    Attributes:
        error: Error message describing the failure.
    """

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Mixin providing Worker lifecycle management for effect jobs.

    - `start_worker()`: Worker creation with the standard options
    - `run_job()`: Run a job and post its result as `EffectResult`
    - `cancel_workers()`: Cancel all running workers (uses `self.workers`)
    - `on_worker_state_changed()`: Logs state changes and keeps `pending_jobs`

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def on_effect_result(self, event: EffectResult) -> None:
                self.engine.dispatch_message(event.result)
        ```
    """

    pending_jobs = reactive(0)

    def __init__(self) -> None:
        # Screen.__init__ must run for Textual internals (_running etc.)
        super().__init__()
        self._job_started: dict[str, float] = {}

    @property
    def is_loading(self) -> bool:
        """True while at least one job is in flight."""
        return self.pending_jobs > 0

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = False,
        thread: bool = False,
        name: str | None = None,
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Start a worker.

        Args:
            worker_func: Async function to run in the worker.
            exclusive: If True, cancel previous workers before starting.
            thread: If False, run in the event loop (preferred for I/O).
            name: Optional worker name for debugging.
            exit_on_error: If False, errors don't crash the app.

        Returns:
            The Worker instance.
        """
        if exclusive:
            with suppress(NoActiveAppError):
                self.workers.cancel_all()  # type: ignore[attr-defined]

        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            exclusive=exclusive,
            thread=thread,
            name=name,
            exit_on_error=exit_on_error,
        )

    def run_job(
        self,
        job: Callable[[], Awaitable[signals.Message]],
        *,
        name: str | None = None,
    ) -> Worker[Any]:
        """Run ``job`` in a worker and post its result to this screen."""

        async def _run() -> None:
            started = time.monotonic()
            result = await job()
            duration_ms = (time.monotonic() - started) * 1000
            self.post_message(EffectResult(result, duration_ms))  # type: ignore[attr-defined]

        self.pending_jobs += 1
        return self.start_worker(_run, name=name)

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker state changes and track jobs in flight.

        Args:
            event: The worker state change event.
        """
        worker = event.worker
        key = str(id(worker))
        if event.state == WorkerState.RUNNING:
            self._job_started[key] = time.monotonic()
            return
        if event.state not in (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR):
            return

        started = self._job_started.pop(key, None)
        duration_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
        self.pending_jobs = max(0, self.pending_jobs - 1)

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{worker.name}' was cancelled ({duration_ms:.2f}ms)")
        elif event.state == WorkerState.ERROR:
            logger.error(f"Worker '{worker.name}' error: {worker.error} ({duration_ms:.2f}ms)")
            self.post_message(JobCrashed(str(worker.error)))  # type: ignore[attr-defined]
        else:
            logger.debug(f"Worker '{worker.name}' completed successfully ({duration_ms:.2f}ms)")


__all__ = [
    "EffectResult",
    "JobCrashed",
    "WorkerMixin",
]
