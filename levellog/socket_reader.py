"""Command that prints UDP datagrams received during a fixed period."""

from __future__ import annotations

import argparse
import select
import socket
import sys
import time
from collections.abc import Sequence
from typing import TextIO

__all__ = ["LOCAL_PORT", "receive_messages", "main"]

LOCAL_PORT = 48001
_BUFFER_SIZE = 1024


def receive_messages(sock: socket.socket, duration: float, out: TextIO) -> int:
    """Write each datagram received within ``duration`` seconds to ``out``, one per line.

    Returns the number of datagrams received.
    """
    if duration < 0:
        raise ValueError("duration must not be negative")
    deadline = time.monotonic() + duration
    received = 0
    while True:
        remaining = max(0.0, deadline - time.monotonic())
        readable, _, _ = select.select([sock], [], [], remaining)
        if readable:
            try:
                data = sock.recv(_BUFFER_SIZE)
            except (BlockingIOError, ConnectionResetError):
                data = b""
            if data:
                out.write(data.decode("utf-8", errors="replace") + "\n")
                out.flush()
                received += 1
        if time.monotonic() >= deadline:
            break
    return received


def main(argv: Sequence[str] | None = None) -> int:
    """Listen on a UDP port and print what arrives for a fixed number of seconds."""
    parser = argparse.ArgumentParser(
        prog="levellog-socket-reader",
        description="Print log records received over UDP.",
    )
    parser.add_argument("--port", type=int, default=LOCAL_PORT)
    parser.add_argument("--duration", type=float, default=100.0)
    args = parser.parse_args(argv)

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
        sock.bind(("", args.port))
        receive_messages(sock, args.duration, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())