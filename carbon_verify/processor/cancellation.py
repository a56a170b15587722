import threading

from carbon_verify.processor.exceptions import ProcessingCancelledError


class CancellationToken:
    """Cooperative cancellation shared by every delay of one run.

    The owner of the run (a CLI, a request handler, a dialog) calls
    :meth:`cancel`; pending and future waits return immediately.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def wait(self, seconds: float) -> bool:
        """Sleep up to *seconds*; return True if cancelled meanwhile."""
        if seconds <= 0:
            return self.cancelled
        return self._event.wait(seconds)

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise ProcessingCancelledError("Processing run was cancelled")
