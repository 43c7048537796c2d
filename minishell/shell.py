"""Interactive loop: reading, splitting and running command lines."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from minishell import commands
from minishell.commands import COMMAND_NAMES, CommandError
from minishell.filelist import FileList
from minishell.historic import History

PROMPT = "$>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UnknownCommandError(Exception):
    """The first word of a line is not a known command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"unknown command: {command!r}")
        self.command = command


class ShellExit(Exception):
    """Raised by the quit commands to leave the shell."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_line(line: str) -> list[str]:
    """Split a command line into words separated by spaces."""
    return [part for part in line.rstrip("\r\n").split(" ") if part]


class Shell:
    """A small command shell with a history of the lines it has run."""

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.history = History()
        self.files = FileList()

    def process(self, line: str) -> None:
        """Run one command line."""
        line = line.rstrip("\r\n")
        parts = parse_line(line)
        name = parts[0] if parts else ""
        if name not in COMMAND_NAMES:
            raise UnknownCommandError(name)
        if name != "historic":
            self.history.append(line, parts)
        option = parts[1] if len(parts) > 1 else None
        try:
            self._dispatch(name, option)
        except CommandError as exc:
            self.stderr.write(f"{exc}\n")

    def _dispatch(self, name: str, option: str | None) -> None:
        match name:
            case "authors":
                output = commands.authors(option)
            case "pid":
                output = commands.pid()
            case "ppid":
                output = commands.ppid()
            case "cd":
                output = commands.cd(option)
            case "date":
                output = commands.date(option)
            case "historic":
                self._historic(option)
                return
            case "infosys":
                output = commands.infosys()
            case "help":
                output = commands.help_cmd()
            case "bye" | "exit" | "quit":
                raise ShellExit(0)
            case _:
                # open, close and dup are accepted and recorded, with no effect.
                return
        self.stdout.write(output)

    def _historic(self, option: str | None) -> None:
        if option is None:
            self.stdout.write(self.history.format())
            return
        _, dash, tail = option.partition("-")
        if dash:
            self.stdout.write(self.history.format(_atoi(tail)))
            return
        n = _atoi(option)
        entry = self.history.get(n)
        if entry is None:
            raise CommandError(f"There is no command at position {n} of the history")
        self.process(entry.line)

    def run(self, stdin: TextIO | None = None) -> int:
        """Read and run lines until a quit command or end of input."""
        stdin = sys.stdin if stdin is None else stdin
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = stdin.readline()
            if not line:
                return 0
            try:
                self.process(line)
            except ShellExit as exc:
                return exc.code
            except UnknownCommandError as exc:
                self.stdout.write(f"{exc.command}\n")
                self.stderr.write(f"An error has occurred: {exc}\n")
                return 1


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on standard input."""
    return Shell().run(sys.stdin)


if __name__ == "__main__":
    raise SystemExit(main())