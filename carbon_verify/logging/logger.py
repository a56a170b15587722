import logging
import sys


class Log:
    """Process-wide logging facade over the ``carbon_verify`` logger."""

    _logger: logging.Logger = logging.getLogger("carbon_verify")
    _FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a stderr handler once."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(cls._FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def for_run(cls, run_id: str) -> "RunLog":
        """Return a logger that prefixes every message with the run id."""
        return RunLog(run_id)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, exc: BaseException) -> None:
        """Log an error together with the traceback of *exc*."""
        cls._logger.error(message, exc_info=exc)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)


class RunLog:
    """Per-run view of :class:`Log`, e.g. ``[run 3f2a9c1b] Extracting...``."""

    def __init__(self, run_id: str) -> None:
        self.run_id = run_id
        self._prefix = f"[run {run_id}] "

    def info(self, message: str) -> None:
        Log.info(self._prefix + message, run_id=self.run_id)

    def warning(self, message: str) -> None:
        Log.warning(self._prefix + message, run_id=self.run_id)

    def error(self, message: str) -> None:
        Log.error(self._prefix + message, run_id=self.run_id)

    def debug(self, message: str) -> None:
        Log.debug(self._prefix + message, run_id=self.run_id)
