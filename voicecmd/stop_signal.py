"""One-shot stop flag raised by Enter or by SIGINT/SIGTERM."""

from __future__ import annotations

import logging
import signal
import sys
import threading
from contextlib import contextmanager

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class StopSignal:
    """Thread-safe flag that flips to set once and never resets.

    Several sources may race to set it; the first one wins and is kept in
    `reason`, later calls are no-ops. Signal handlers go through
    `_set_from_signal`, which takes no locks: a handler can interrupt the main
    thread anywhere, including inside another handler.
    """

    def __init__(self):
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._signalled = False
        self.reason = ""

    def set(self, reason: str = ""):
        with self._lock:
            if self.is_set():
                return
            self.reason = reason
            self._event.set()
        logger.info("Stop requested (%s)", reason or "unspecified")

    def _set_from_signal(self, name: str):
        if not self.reason:
            self.reason = name
        self._signalled = True

    def is_set(self) -> bool:
        return self._signalled or self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until set from a thread. A signal arriving during the wait is
        only seen once it returns, so poll `is_set` on the main thread."""
        if self._signalled:
            return True
        return self._event.wait(timeout) or self._signalled

    def watch_stdin(self, stream=None) -> threading.Thread:
        """Set the flag once a line (or EOF) is read from `stream`.

        The reader thread blocks indefinitely and is abandoned at exit.
        """
        source = stream if stream is not None else sys.stdin

        def wait_for_enter():
            try:
                source.readline()
            except (OSError, ValueError) as e:
                logger.debug("stdin watcher stopped reading: %s", e)
            self.set("enter")

        thread = threading.Thread(target=wait_for_enter, name="stdin-stop-watcher", daemon=True)
        thread.start()
        return thread

    @contextmanager
    def watch_signals(self, signals=STOP_SIGNALS):
        """Treat `signals` as a stop request while the block runs.

        Must be entered from the main thread. Previous handlers are restored
        on exit.
        """

        def handle(signum, _frame):
            self._set_from_signal(signal.Signals(signum).name)

        previous = {}
        try:
            for signum in signals:
                previous[signum] = signal.signal(signum, handle)
            yield self
        finally:
            for signum, handler in previous.items():
                # None means the old handler was not installed from Python.
                signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
