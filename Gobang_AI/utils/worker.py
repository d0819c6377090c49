"""Background search runner with a single-slot, non-blocking result handoff."""

import queue
import threading


class SearchWorker:
    """
    Run one search at a time on a daemon thread. The UI thread calls poll() once
    per frame; the result (or the exception the search raised) is handed over
    through a queue that holds at most one item.
    """

    def __init__(self):
        self._results = queue.Queue(maxsize=1)
        self._thread = None

    @property
    def busy(self):
        return self._thread is not None

    def start(self, search, *args):
        if self.busy:
            raise RuntimeError("A search is already in flight")
        self._thread = threading.Thread(target=self._run, args=(search, args), daemon=True)
        self._thread.start()

    def _run(self, search, args):
        try:
            result = search(*args)
        except Exception as exc:
            result = exc
        self._results.put(result)

    def poll(self):
        """Return the finished result, or None while the search is still running."""
        try:
            result = self._results.get_nowait()
        except queue.Empty:
            return None
        return self._finish(result)

    def wait(self, timeout=None):
        """Block until the running search finishes and return its result."""
        if not self.busy:
            raise RuntimeError("No search is running")
        return self._finish(self._results.get(timeout=timeout))

    def _finish(self, result):
        self._thread.join()
        self._thread = None
        if isinstance(result, Exception):
            raise result
        return result
