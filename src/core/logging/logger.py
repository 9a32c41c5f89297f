from abc import ABC, abstractmethod
import copy
import logging
from pathlib import Path
import typing as t

from .formatters import ColorizedFormatter, JsonFormatter


class AbstractLogger(ABC):
    @abstractmethod
    def debug(self, msg: str, **attrs): ...
    @abstractmethod
    def info(self, msg: str, **attrs): ...
    @abstractmethod
    def warning(self, msg: str, **attrs): ...
    @abstractmethod
    def error(self, msg: str, **attrs): ...
    @abstractmethod
    def exception(self, msg: str, **attrs): ...
    @abstractmethod
    def bind(self, **attrs) -> "AbstractLogger":
        """Returns a logger which adds ``attrs`` to every record it emits"""


def _build_base_logger(name: str, debug: bool, error_log_path: str) -> logging.Logger:
    logger = logging.Logger(name)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    formatter: logging.Formatter = ColorizedFormatter()
    if not debug:
        formatter = JsonFormatter()
        Path(error_log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(error_log_path, "a")
        file_handler.setLevel(logging.WARNING)
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


class AppLogger(AbstractLogger):
    """Structured logger: keyword arguments of each call end up in ``record.attrs``.

    Console output is colorized in debug mode. Otherwise records are written
    as json lines and warnings with higher levels also go to ``error_log_path``.
    """

    def __init__(self, debug: bool, error_log_path: str, name: str = "SHOPCART"):
        self._base_log = _build_base_logger(name, debug, error_log_path)
        self._base_log.makeRecord = self.makeRecord
        self._context: dict[str, t.Any] = {}

    def makeRecord(
        self,
        name,
        level,
        fn,
        lno,
        msg,
        args,
        exc_info,
        func=None,
        extra=None,
        sinfo=None,
    ):
        rv = logging.LogRecord(name, level, fn, lno, msg, args, exc_info, func, sinfo)
        rv.attrs = extra if extra is not None else {}
        return rv

    def bind(self, **attrs) -> "AppLogger":
        bound = copy.copy(self)
        bound._context = {**self._context, **attrs}
        return bound

    def _log(self, level: int, msg: str, attrs: dict, exc_info: bool = False) -> None:
        # stacklevel points at the caller of the public method
        self._base_log.log(
            level,
            msg,
            exc_info=exc_info,
            extra={**self._context, **attrs},
            stacklevel=3,
        )

    def info(self, msg: str, **attrs) -> None:
        self._log(logging.INFO, msg, attrs)

    def debug(self, msg: str, **attrs) -> None:
        self._log(logging.DEBUG, msg, attrs)

    def warning(self, msg: str, **attrs) -> None:
        self._log(logging.WARNING, msg, attrs)

    def error(self, msg: str, **attrs) -> None:
        self._log(logging.ERROR, msg, attrs)

    def exception(self, msg: str, **attrs) -> None:
        self._log(logging.ERROR, msg, attrs, exc_info=True)


class StubLogger(AbstractLogger):
    """Logger stub for use in tests to avoid printing logging messages"""

    def debug(self, msg: str, **attrs): ...
    def info(self, msg: str, **attrs): ...
    def warning(self, msg: str, **attrs): ...
    def error(self, msg: str, **attrs): ...
    def exception(self, msg: str, **attrs): ...
    def bind(self, **attrs) -> "StubLogger":
        return self


stub_logger = StubLogger()
