"""Built-in commands of the shell; each returns the text it prints."""

from __future__ import annotations

import os
import platform
from datetime import datetime

AUTHOR_NAME = "shell author"
AUTHOR_EMAIL = "author@example.com"

COMMAND_NAMES = (
    "authors",
    "pid",
    "ppid",
    "cd",
    "date",
    "historic",
    "open",
    "close",
    "dup",
    "infosys",
    "help",
    "bye",
    "exit",
    "quit",
)


class CommandError(Exception):
    """A built-in command could not do what was asked."""


def authors(option: str | None = None) -> str:
    """Author name and e-mail; -n for the name only, -l for the e-mail only."""
    if option is None:
        return f"{AUTHOR_NAME}\n{AUTHOR_EMAIL}\n"
    if option == "-n":
        return f"{AUTHOR_NAME}\n"
    if option == "-l":
        return f"{AUTHOR_EMAIL}\n"
    raise CommandError("An unknown option has been introduced in authors")


def pid() -> str:
    return f"pid:{os.getpid()}\n"


def ppid() -> str:
    return f"ppid:{os.getppid()}\n"


def cd(directory: str | os.PathLike | None = None) -> str:
    """Print the working directory, or change to the given one."""
    if directory is None:
        try:
            return f"{os.getcwd()}\n"
        except OSError as exc:
            raise CommandError(
                "An error has ocurred while printing current directory"
            ) from exc
    try:
        os.chdir(directory)
    except OSError as exc:
        raise CommandError(
            "An error has ocurred while changing working directory"
        ) from exc
    return ""


def date(option: str | None = None, now: datetime | None = None) -> str:
    """Current time and date; -t for the time only, -d for the date only."""
    now = datetime.now() if now is None else now
    time_text = f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}\n"
    date_text = f"{now.day:02d}/{now.month:02d}/{now.year:04d}\n"
    if option is None:
        return time_text + date_text
    if option == "-t":
        return time_text
    if option == "-d":
        return date_text
    raise CommandError("An unknown option has been introduced in date")


def infosys() -> str:
    """Operating system, node name, release, version and architecture."""
    info = platform.uname()
    return (
        f"SO:{info.system}\n"
        f"Nodename:{info.node}\n"
        f"Release:{info.release}\n"
        f"Versión:{info.version}\n"
        f"Arch:{info.machine}\n"
    )


def help_cmd() -> str:
    """List the commands the shell understands."""
    return "".join(f"{name}\n" for name in COMMAND_NAMES)