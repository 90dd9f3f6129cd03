"""Fan-out of log entries to transports with isolated failures.

Every transport is invoked in attachment order. A transport that raises is
reported and skipped. A transport that returns an awaitable has it scheduled
without waiting: on the running event loop when there is one, otherwise on a
background event loop thread. Failures of scheduled work are reported from
a done-callback. Nothing here ever raises into the logging call.
"""

import asyncio
import atexit
import concurrent.futures
import functools
import inspect
import logging
import threading
from collections.abc import Awaitable, Coroutine, Iterable
from typing import Any

from viol.core.models import LogEntry
from viol.core.ports import Transport

_logger = logging.getLogger(__name__)

# Grace period for background transport work at interpreter exit.
_EXIT_TIMEOUT_SECONDS = 2.0

_lock = threading.Lock()
_idle = threading.Condition(_lock)
_pending_tasks: set[asyncio.Task[Any]] = set()
_pending_futures: set[concurrent.futures.Future[Any]] = set()


def report_transport_error(transport: Transport, exc: BaseException) -> None:
    """Report a transport failure to the diagnostic logger."""
    _logger.warning("transport error in %r: %s", transport, exc, exc_info=exc)


class _BackgroundLoop:
    """Event loop running on a daemon thread, started on first use.

    Used for asynchronous transports invoked from code that has no running
    event loop of its own.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None

    def _ensure_started(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                loop = asyncio.new_event_loop()
                thread = threading.Thread(
                    target=loop.run_forever, name="viol-dispatch", daemon=True
                )
                thread.start()
                self._loop, self._thread = loop, thread
            return self._loop

    def submit(
        self, coro: Coroutine[Any, Any, Any]
    ) -> concurrent.futures.Future[Any]:
        """Schedule a coroutine on the background loop."""
        return asyncio.run_coroutine_threadsafe(coro, self._ensure_started())

    def stop(self) -> None:
        """Stop the background loop if it was started."""
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = self._thread = None
        if loop is None or thread is None:
            return
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=_EXIT_TIMEOUT_SECONDS)


_background = _BackgroundLoop()


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _on_task_done(transport: Transport, task: asyncio.Task[Any]) -> None:
    if not task.cancelled() and task.exception() is not None:
        report_transport_error(transport, task.exception())
    with _lock:
        _pending_tasks.discard(task)


def _on_future_done(
    transport: Transport, future: concurrent.futures.Future[Any]
) -> None:
    if not future.cancelled() and future.exception() is not None:
        report_transport_error(transport, future.exception())
    with _idle:
        _pending_futures.discard(future)
        _idle.notify_all()


def _schedule(transport: Transport, awaitable: Awaitable[Any]) -> None:
    """Start asynchronous transport work without waiting for it."""
    coro = awaitable if asyncio.iscoroutine(awaitable) else _await(awaitable)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    try:
        if loop is not None:
            task = loop.create_task(coro)
            with _lock:
                _pending_tasks.add(task)
            task.add_done_callback(functools.partial(_on_task_done, transport))
            return
        future = _background.submit(coro)
    except RuntimeError:
        coro.close()
        raise
    with _lock:
        _pending_futures.add(future)
    future.add_done_callback(functools.partial(_on_future_done, transport))


def dispatch(entry: LogEntry, transports: Iterable[Transport]) -> None:
    """Send an entry to every transport, isolating each failure.

    Args:
        entry: The log entry to deliver.
        transports: Transports in attachment order.
    """
    for transport in transports:
        try:
            result = transport.emit(entry)
            if inspect.isawaitable(result):
                _schedule(transport, result)
        except Exception as exc:
            report_transport_error(transport, exc)


async def flush() -> None:
    """Wait for pending asynchronous transport work.

    Waits for tasks started on the current event loop and for work running
    on the background loop. Transport failures are reported, not raised.
    """
    loop = asyncio.get_running_loop()
    current = asyncio.current_task()
    while True:
        with _lock:
            tasks = [
                t
                for t in _pending_tasks
                if t is not current and not t.done() and t.get_loop() is loop
            ]
            futures = [f for f in _pending_futures if not f.done()]
        if not tasks and not futures:
            return
        await asyncio.gather(
            *tasks,
            *(asyncio.wrap_future(f) for f in futures),
            return_exceptions=True,
        )


def flush_sync(timeout: float | None = None) -> bool:
    """Block until background transport work has finished.

    Work scheduled on a caller's own event loop is not covered; use flush()
    from inside that loop.

    Args:
        timeout: Maximum number of seconds to wait. None waits forever.

    Returns:
        True if nothing is pending any more, False if the timeout expired.
    """
    with _idle:
        return _idle.wait_for(lambda: not _pending_futures, timeout)


def _shutdown() -> None:
    flush_sync(timeout=_EXIT_TIMEOUT_SECONDS)
    _background.stop()


atexit.register(_shutdown)
