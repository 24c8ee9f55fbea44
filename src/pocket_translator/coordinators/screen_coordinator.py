"""Base class for per-screen coordinators."""

from typing import Dict, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool


class ScreenCoordinator(QObject):
    """
    Owns the local state of one screen for as long as it is active.

    The shell calls ``activate()`` when the screen is shown and
    ``deactivate()`` when it is hidden. Deactivation resets local state and
    releases any held resources. Results of requests started before the
    last deactivation are stale and must not repaint the screen.
    """

    def __init__(self, thread_pool: Optional[QThreadPool] = None):
        super().__init__()
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self._request_counter = 0
        self._active_request_id: Optional[int] = None

        # Workers stay referenced until they finish so their signal
        # objects outlive the background thread.
        self._running_workers: Dict[int, QRunnable] = {}

    def activate(self) -> None:
        """Called when the screen becomes visible."""

    def deactivate(self) -> None:
        """Called when the screen is hidden; invalidates pending requests."""
        self._active_request_id = None

    def _next_request_id(self) -> int:
        self._request_counter += 1
        return self._request_counter

    def _is_current(self, request_id: int) -> bool:
        return request_id == self._active_request_id

    def _start_worker(self, worker: QRunnable) -> None:
        key = id(worker)
        self._running_workers[key] = worker
        worker.signals.finished.connect(lambda _request_id, key=key: self._release_worker(key))
        self.thread_pool.start(worker)

    def _release_worker(self, key: int) -> None:
        self._running_workers.pop(key, None)
