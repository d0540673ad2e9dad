"""Command that sends periodic log records over UDP."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from collections.abc import Sequence

from levellog.logger import Level, Logger, SocketLogger

__all__ = ["LOCAL_PORT", "REMOTE_PORT", "open_socket", "send_messages", "main"]

LOCAL_PORT = 48000
REMOTE_PORT = 48001
REMOTE_HOST = "127.0.0.1"


def open_socket(local_port: int, remote_host: str, remote_port: int) -> socket.socket:
    """Return a UDP socket bound to ``local_port`` and connected to the remote address."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    try:
        sock.bind(("", local_port))
        sock.connect((remote_host, remote_port))
    except OSError:
        sock.close()
        raise
    return sock


def send_messages(logger: Logger, message: str, count: int, interval: float) -> int:
    """Log ``message`` at high importance ``count`` times, pausing ``interval`` seconds after each.

    Returns how many records passed the logger's threshold.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if interval < 0:
        raise ValueError("interval must not be negative")
    written = 0
    for _ in range(count):
        if logger.log(message, Level.HIGH):
            written += 1
        if interval:
            time.sleep(interval)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Send a message once per interval to a UDP listener."""
    parser = argparse.ArgumentParser(
        prog="levellog-socket-writer",
        description="Send log records to a UDP listener.",
    )
    parser.add_argument("--local-port", type=int, default=LOCAL_PORT)
    parser.add_argument("--remote-host", default=REMOTE_HOST)
    parser.add_argument("--remote-port", type=int, default=REMOTE_PORT)
    parser.add_argument("--message", default="Hello")
    parser.add_argument("--count", type=int, default=100)
    parser.add_argument("--interval", type=float, default=1.0)
    args = parser.parse_args(argv)

    with open_socket(args.local_port, args.remote_host, args.remote_port) as sock:
        with SocketLogger(sock, Level.STANDART) as logger:
            send_messages(logger, args.message, args.count, args.interval)
    return 0


if __name__ == "__main__":
    sys.exit(main())