"""Cancellation token shared between the SIGINT handler and insert mode."""

from __future__ import annotations

import threading


class CancellationToken:
    """One-shot flag set from signal context and polled by the main loop.

    ``threading.Event`` gives a flag whose ``set`` is safe to call from a
    signal handler while the main thread is blocked in a read.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


__all__ = ["CancellationToken"]
