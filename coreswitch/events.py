import logging
from typing import Any, Protocol

__all__ = ("EventSink", "LoggingSink", "NullSink")


class EventSink(Protocol):
    def record(self, event: str, **fields: Any) -> None: ...


class LoggingSink:
    def __init__(self, logger: logging.Logger, *, level: int = logging.DEBUG):
        self.logger = logger
        self.level = level

    def record(self, event: str, **fields: Any) -> None:
        details = " ".join(f"{key}={value}" for key, value in fields.items())

        self.logger.log(self.level, "%s %s", event, details)


class NullSink:
    def record(self, event: str, **fields: Any) -> None:
        return None
