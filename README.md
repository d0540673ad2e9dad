# levellog

levellog is a small logging library. It keeps only the messages whose importance
is at or above a threshold you choose. The kept messages go to a file or out
over a connected UDP socket. Three console commands come with the library.

## Levels

`levellog.logger.Level` is an `IntEnum` with three members:

- `Level.LOW` (1)
- `Level.STANDART` (2)
- `Level.HIGH` (3)

A logger writes a message only when the message's level is at least the
logger's default level. Levels can be given as `Level` members or as the plain
integers 1–3. Any other value raises `ValueError`.

Each record is one line in this form:

```
2024-01-31 12:00:00 | high | message text
```

`format_record(message, level, when)` builds one such line, including the
trailing newline, from a `datetime`.

## Library use

```python
from levellog.logger import FileLogger, Level

with FileLogger("app.log", Level.STANDART) as logger:
    logger.log("skipped", Level.LOW)        # returns False
    logger.log("written", Level.HIGH)       # returns True
    logger.set_default_level(Level.LOW)
    logger.log("now written too", Level.LOW)
```

- `Logger` is the abstract base class. It provides `log(message, level)`, which
  returns whether the record was written, `set_default_level(level)`, the
  read-only `default_level`, `close()` and context-manager support. Calls are
  guarded by a lock, so one logger can be shared between threads.
- `FileLogger(path, default_level)` opens `path` for writing. Any earlier
  contents are replaced. Each record is flushed as soon as it is written. Once
  the logger is closed, logging a record that passes the threshold raises
  `ValueError`.
- `SocketLogger(sock, default_level)` sends each record as one datagram over a
  connected socket, without blocking. Send errors are ignored. The logger does
  not close the socket, because the caller owns it. Passing a socket that is
  already closed raises `ValueError`.

### Queued logging

`levellog.file_client.QueueLogWorker(logger)` runs a background thread. That
thread passes submitted messages to the logger in the order they were
submitted.

- `submit(message, level)` queues a message.
- `set_default_level(level)` queues a change of the threshold. The change takes
  effect after the messages queued before it.
- `close()`, or leaving the `with` block, writes everything already queued and
  then stops the thread. Submitting after that raises `RuntimeError`.

`parse_level(value)` turns a `Level`, an integer or a numeric string into a
`Level`. It raises `ValueError` for anything else.

## Commands

Running `pip install .` installs three commands.

### `levellog-file-client LOG_FILE LEVEL`

This command opens `LOG_FILE` with the threshold `LEVEL` (1, 2 or 3) and then
shows a menu on standard input and output:

1. Change the message importance threshold.
2. Send a message. The command asks for a level from 1 to 3, or 4 for the
   current default, and then for the message text.
3. Exit.

A background worker writes the messages to the file. The session ends when you
choose 3 or when input runs out. Messages still in the queue are written before
the command exits. The command exits with status 1 if the level is invalid or
the file cannot be opened, and with status 2 if arguments are missing.

The same menu is available from Python as
`run_session(logger, default_level, lines, out)`, which reads its answers from
any iterable of lines.

### `levellog-socket-writer`

This command binds a UDP socket to a local port and connects it to a remote
address. It then logs a message at `HIGH` importance a fixed number of times,
pausing after each one. The threshold is `STANDART`.

| Option | Default |
| --- | --- |
| `--local-port` | 48000 |
| `--remote-host` | 127.0.0.1 |
| `--remote-port` | 48001 |
| `--message` | `Hello` |
| `--count` | 100 |
| `--interval` | 1.0 (seconds) |

From Python, use `open_socket(local_port, remote_host, remote_port)` and
`send_messages(logger, message, count, interval)`. `send_messages` returns how
many records passed the threshold.

### `levellog-socket-reader`

This command binds a UDP port and prints every datagram it receives, each
followed by a newline, until the duration has passed. It reads at most 1024
bytes per datagram.

| Option | Default |
| --- | --- |
| `--port` | 48001 |
| `--duration` | 100.0 (seconds) |

From Python, `receive_messages(sock, duration, out)` does the same work on a
socket you supply. It returns the number of datagrams it received.

To see records arrive, start `levellog-socket-reader` in one terminal and
`levellog-socket-writer` in another.

## Tests

```
pip install .[test]
pytest
```