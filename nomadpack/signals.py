"""Cancellation tied to the interrupt signal."""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def with_interrupt(parent: threading.Event | None = None) -> Iterator[threading.Event]:
    """Yield an event that is set when SIGINT arrives or ``parent`` is set.

    On exit the previous SIGINT handler is restored and the event is set.
    """
    cancelled = threading.Event()
    previous = signal.getsignal(signal.SIGINT)

    def _on_interrupt(signum, frame):
        cancelled.set()

    signal.signal(signal.SIGINT, _on_interrupt)

    watcher = None
    if parent is not None:

        def _watch_parent() -> None:
            while not cancelled.is_set():
                if parent.wait(0.05):
                    cancelled.set()

        watcher = threading.Thread(target=_watch_parent, daemon=True)
        watcher.start()

    try:
        yield cancelled
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
        cancelled.set()
        if watcher is not None:
            watcher.join()