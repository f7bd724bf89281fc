"""Helpers for deferred AI turns and the game clock."""

import threading
import time


def elapsed_since(start, end=None):
    return (time.time() if end is None else end) - start


class _Handle:
    def __init__(self, cancel=None):
        self._cancel = cancel
        self.cancelled = False

    def cancel(self):
        self.cancelled = True
        if self._cancel:
            self._cancel()


class ThreadScheduler:
    """Run callbacks on a background timer thread after `delay` seconds."""

    def schedule(self, delay, callback):
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return _Handle(timer.cancel)


class BlockingScheduler:
    """Sleep for the delay, then run the callback on the calling thread."""

    def schedule(self, delay, callback):
        handle = _Handle()
        if delay > 0:
            time.sleep(delay)
        if not handle.cancelled:
            callback()
        return handle


class ManualScheduler:
    """Queue callbacks until run_pending() is called."""

    def __init__(self):
        self._queue = []

    def schedule(self, delay, callback):
        handle = _Handle()
        self._queue.append((handle, callback))
        return handle

    @property
    def pending(self):
        return sum(1 for handle, _ in self._queue if not handle.cancelled)

    def run_pending(self):
        """Run queued callbacks (including ones queued while running). Returns how many ran."""
        ran = 0
        while self._queue:
            handle, callback = self._queue.pop(0)
            if handle.cancelled:
                continue
            callback()
            ran += 1
        return ran
