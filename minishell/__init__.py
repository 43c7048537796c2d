"""A small interactive shell with built-in commands and a command history."""

__version__ = "0.1.0"
__all__ = ["commands", "filelist", "historic", "shell"]