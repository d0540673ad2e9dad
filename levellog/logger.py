"""Level-filtered loggers that write timestamped records to a file or a socket."""

from __future__ import annotations

import socket
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from enum import IntEnum
from os import PathLike
from types import TracebackType

__all__ = ["Level", "Logger", "FileLogger", "SocketLogger", "format_record"]

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_SEPARATOR = " | "
_SEND_FLAGS = getattr(socket, "MSG_DONTWAIT", 0)


class Level(IntEnum):
    """Importance of a message; higher values are more important."""

    LOW = 1
    STANDART = 2
    HIGH = 3

    @property
    def label(self) -> str:
        """Lower-case name used in formatted records."""
        return self.name.lower()


def _as_level(level: Level | int) -> Level:
    return Level(level)


def format_record(message: str, level: Level | int, when: datetime) -> str:
    """Render one log record as ``time | level | message`` followed by a newline."""
    level = _as_level(level)
    return f"{when.strftime(_TIME_FORMAT)}{_SEPARATOR}{level.label}{_SEPARATOR}{message}\n"


class Logger(ABC):
    """Writes messages whose level is at least the default level."""

    def __init__(self, default_level: Level | int) -> None:
        self._default_level = _as_level(default_level)
        self._lock = threading.Lock()

    @property
    def default_level(self) -> Level:
        """The threshold below which messages are dropped."""
        return self._default_level

    def log(self, message: str, level: Level | int) -> bool:
        """Write ``message`` if ``level`` reaches the threshold; return whether it was written."""
        level = _as_level(level)
        with self._lock:
            if level < self._default_level:
                return False
            self._write(format_record(message, level, datetime.now()))
            return True

    def set_default_level(self, level: Level | int) -> None:
        """Change the threshold used by later calls to :meth:`log`."""
        level = _as_level(level)
        with self._lock:
            self._default_level = level

    def close(self) -> None:
        """Release resources held by the logger."""

    def __enter__(self) -> "Logger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @abstractmethod
    def _write(self, record: str) -> None:
        """Deliver one formatted record."""


class FileLogger(Logger):
    """Logger that writes records to a file, replacing any previous contents."""

    def __init__(self, path: str | PathLike[str], default_level: Level | int) -> None:
        super().__init__(default_level)
        self._file = open(path, "w", encoding="utf-8")

    @property
    def closed(self) -> bool:
        """Whether the underlying file has been closed."""
        return self._file.closed

    def _write(self, record: str) -> None:
        if self._file.closed:
            raise ValueError("logger is closed")
        self._file.write(record)
        self._file.flush()

    def close(self) -> None:
        """Close the underlying file."""
        with self._lock:
            self._file.close()


class SocketLogger(Logger):
    """Logger that sends each record over a connected socket without blocking.

    The socket is owned by the caller and is not closed by this logger.
    Delivery errors are ignored, as with a fire-and-forget datagram.
    """

    def __init__(self, sock: socket.socket, default_level: Level | int) -> None:
        if sock.fileno() < 0:
            raise ValueError("socket is not open")
        super().__init__(default_level)
        self._sock = sock

    def _write(self, record: str) -> None:
        try:
            self._sock.send(record.encode("utf-8"), _SEND_FLAGS)
        except OSError:
            pass