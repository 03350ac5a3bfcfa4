"""
Console progress ticker shown while a Gemini call is outstanding.
"""

import sys
import threading
import time

from invoice_sorter.config import PROGRESS_INTERVAL


class ElapsedTimer:
    """
    Context manager that rewrites ``Elapsed time: Ns`` on one console line
    every ``interval`` seconds until the block exits, on success or error.
    """

    def __init__(self, interval=PROGRESS_INTERVAL, stream=None):
        self.interval = interval
        self.stream = stream if stream is not None else sys.stdout
        self._stop = threading.Event()
        self._thread = None
        self._start_time = None

    def __enter__(self):
        self._start_time = time.monotonic()
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="elapsed-timer", daemon=True)
        self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._stop.set()
        self._thread.join()
        self._thread = None
        self.stream.write("\n")
        self.stream.flush()
        return False

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def _run(self):
        while not self._stop.wait(self.interval):
            elapsed = int(time.monotonic() - self._start_time)
            self.stream.write(f"\rElapsed time: {elapsed}s")
            self.stream.flush()
