"""Interactive console client that queues messages for a file logger."""

from __future__ import annotations

import queue
import sys
import threading
from collections.abc import Callable, Iterable, Sequence
from functools import partial
from types import TracebackType
from typing import TextIO

from levellog.logger import FileLogger, Level, Logger

__all__ = ["QueueLogWorker", "parse_level", "run_session", "main"]

_MENU = (
    "Select operation: \n"
    "[1] - Change the message importance threshold\n"
    "[2] - Send message\n"
    "[3] - Exit the program\n"
)
_THRESHOLD_PROMPT = (
    "\nEnter the importance of the message: "
    "\n[1] - low,\n[2] - standart\n[3] - high\n"
)
_MESSAGE_LEVEL_PROMPT = (
    "Enter message importance level: "
    "\n[1] - low,\n[2] - standart\n[3] - high\n[4] - default\n"
)
_MESSAGE_PROMPT = "Enter your message: "
_INCORRECT_LEVEL = "Incorrect importance level value\n"
_TERMINATING = "The program is terminating its work.\n"
_INPUT_ERROR = "Input error!\n"
_DEFAULT_CHOICE = 4


def parse_level(value: Level | int | str) -> Level:
    """Convert ``value`` to a :class:`Level`, raising ``ValueError`` if it is not 1, 2 or 3."""
    if isinstance(value, Level):
        return value
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid importance level: {value!r}") from None
    try:
        return Level(number)
    except ValueError:
        raise ValueError(f"invalid importance level: {value!r}") from None


class QueueLogWorker:
    """Hands messages to a logger from a background thread, in submission order."""

    def __init__(self, logger: Logger) -> None:
        self._logger = logger
        self._queue: queue.Queue[Callable[[], object] | None] = queue.Queue()
        self._state_lock = threading.Lock()
        self._closed = False
        self._thread = threading.Thread(
            target=self._run, name="levellog-worker", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        while True:
            task = self._queue.get()
            if task is None:
                break
            task()

    def _put(self, task: Callable[[], object]) -> None:
        with self._state_lock:
            if self._closed:
                raise RuntimeError("worker is closed")
            self._queue.put(task)

    def submit(self, message: str, level: Level | int | str) -> None:
        """Queue ``message`` to be logged with ``level``."""
        self._put(partial(self._logger.log, message, parse_level(level)))

    def set_default_level(self, level: Level | int | str) -> None:
        """Queue a change of the logger's threshold, applied after earlier messages."""
        self._put(partial(self._logger.set_default_level, parse_level(level)))

    def close(self) -> None:
        """Log everything already queued, then stop the background thread."""
        with self._state_lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(None)
        self._thread.join()

    def __enter__(self) -> "QueueLogWorker":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def run_session(
    logger: Logger,
    default_level: Level | int | str,
    lines: Iterable[str],
    out: TextIO,
) -> int:
    """Run the operation menu over ``lines`` of input until exit or end of input."""
    default_level = parse_level(default_level)
    answers = (line.rstrip("\r\n") for line in lines)

    with QueueLogWorker(logger) as worker:
        while True:
            out.write(_MENU)
            raw_choice = next(answers, None)
            if raw_choice is None:
                break
            choice = _parse_int(raw_choice)

            if choice == 1:
                out.write(_THRESHOLD_PROMPT)
                raw_level = next(answers, None)
                if raw_level is None:
                    break
                try:
                    level = parse_level(raw_level.strip())
                except ValueError:
                    out.write(_INCORRECT_LEVEL)
                    continue
                default_level = level
                worker.set_default_level(level)

            elif choice == 2:
                out.write(_MESSAGE_LEVEL_PROMPT)
                raw_level = next(answers, None)
                if raw_level is None:
                    break
                if _parse_int(raw_level) == _DEFAULT_CHOICE:
                    level = default_level
                else:
                    try:
                        level = parse_level(raw_level.strip())
                    except ValueError:
                        out.write(_INCORRECT_LEVEL)
                        continue
                out.write(_MESSAGE_PROMPT)
                message = next(answers, None)
                if message is None:
                    break
                worker.submit(message, level)

            elif choice == 3:
                out.write(_TERMINATING)
                break

            else:
                out.write(_INPUT_ERROR)
    out.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the client: ``LOG_FILE LEVEL`` where LEVEL is 1, 2 or 3."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: levellog-file-client LOG_FILE LEVEL", file=sys.stderr)
        return 2
    path, raw_level = args[0], args[1]
    try:
        level = parse_level(raw_level)
    except ValueError:
        print(_INCORRECT_LEVEL, end="")
        return 1
    try:
        logger = FileLogger(path, level)
    except OSError as exc:
        print(f"Cannot open log file: {exc}")
        return 1
    with logger:
        return run_session(logger, level, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())