from collections.abc import Mapping
import json
import logging

from core.utils import CustomJSONEncoder

_RESET = "\x1b[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[0;37m",
    logging.INFO: "\x1b[1;36m",
    logging.WARNING: "\x1b[1;33m",
    logging.ERROR: "\x1b[1;31m",
    logging.CRITICAL: "\x1b[5m\x1b[1;31m",
}


def get_attrs(record: logging.LogRecord) -> Mapping:
    return getattr(record, "attrs", None) or {}


def attrs_to_str(attrs: Mapping) -> str:
    return " ".join(f"{key}={value!r}" for key, value in attrs.items())


class ColorizedFormatter(logging.Formatter):
    """Human readable console output, one color per level"""

    fmt = "%(asctime)s %(name)s (%(filename)s:%(lineno)d) %(levelname)s - %(message)s"

    def __init__(self) -> None:
        super().__init__(self.fmt)
        self._level_formatters = {
            level: logging.Formatter(color + self.fmt + _RESET)
            for level, color in _LEVEL_COLORS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._level_formatters.get(record.levelno)
        res = formatter.format(record) if formatter else super().format(record)
        if attrs := get_attrs(record):
            res += " | " + attrs_to_str(attrs)
        return res


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        res = {
            "timestamp": self.formatTime(record),
            "severity": record.levelname,
            "logger": record.name,
            "resource": f"{record.pathname}:{record.lineno}",
            "body": record.getMessage(),
            "attributes": dict(get_attrs(record)),
        }
        if record.exc_info:
            res["exception"] = self.formatException(record.exc_info)
        return json.dumps(res, cls=CustomJSONEncoder)
