import logging
import sys
from typing import TextIO

# Attributes every LogRecord has; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Appends keyword context passed to ``Log`` as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} | {pairs}"


class Log:
    """Process-wide logger for the intake pipeline.

    Call sites pass context as keyword arguments, e.g.
    ``Log.error("...", household_id=hid, step="convert")``.
    """

    _logger: logging.Logger = logging.getLogger("expense_intake")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and install a single handler on ``stream`` (stdout by default)."""
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(ContextFormatter("%(asctime)s [%(levelname)s] %(message)s"))
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(message, extra=context)

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(message, extra=context)

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log at ERROR with the active exception's traceback."""
        cls._logger.exception(message, extra=context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(message, extra=context)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(message, extra=context)
