"""
Thread-safe progress display for batch runs.
"""

import threading

import click


class BatchProgress:
    """
    Completed-file counter plus a best-effort "current file" message.

    Workers call ``set_message`` when they pick up a file and ``advance`` when
    they finish one. Both are serialized by a lock; the message shown is
    whichever worker updated it last.
    """

    def __init__(self, total: int, label: str = "Subsetting", *, enabled: bool = True):
        self.total = total
        self.completed = 0
        self.message: str | None = None
        self._lock = threading.Lock()
        self._bar = None
        if enabled:
            self._bar = click.progressbar(
                length=total,
                label=label,
                show_pos=True,
                show_eta=True,
                fill_char="#",
                empty_char="-",
                width=40,
                item_show_func=lambda item: item,
            )

    def __enter__(self) -> "BatchProgress":
        if self._bar is not None:
            self._bar.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        if self._bar is not None:
            self._bar.__exit__(exc_type, exc_value, tb)

    def set_message(self, message: str) -> None:
        with self._lock:
            self.message = message
            if self._bar is not None:
                self._bar.update(0, message)

    def advance(self) -> int:
        """Count one finished file and return the new total."""
        with self._lock:
            self.completed += 1
            if self._bar is not None:
                self._bar.update(1)
            return self.completed
