"""A small socket-based HTTP/1.1 client with query-string helpers and a command-line front end."""

__version__ = "1.0.0"
__all__ = ["client", "params", "cli"]