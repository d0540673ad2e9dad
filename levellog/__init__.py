"""Level-filtered logging to files and UDP sockets, with console commands."""

__version__ = "0.1.0"
__all__ = ["logger", "file_client", "socket_writer", "socket_reader"]