"""Terminal spinner shown while recording and waiting on the API."""

from __future__ import annotations

from rich.console import Console


class Spinner:
    """Wraps rich's status spinner. Drawn on stderr so stdout stays clean."""

    def __init__(self, console: Console | None = None, spinner: str = "dots"):
        self.console = console or Console(stderr=True)
        self.spinner = spinner
        self._status = None

    def update(self, caption: str):
        """Show `caption`, starting the spinner if it is not running."""
        if self._status is None:
            self._status = self.console.status(caption, spinner=self.spinner)
            self._status.start()
            return
        self._status.update(caption)

    def stop(self):
        if self._status is None:
            return
        self._status.stop()
        self._status = None
