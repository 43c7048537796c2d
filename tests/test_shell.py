import io
import os

import pytest

from minishell.shell import (
    PROMPT,
    Shell,
    ShellExit,
    UnknownCommandError,
    parse_line,
)


@pytest.fixture
def shell():
    return Shell(stdout=io.StringIO(), stderr=io.StringIO())


def test_parse_line_collapses_spaces():
    assert parse_line("ls   -l  a\n") == ["ls", "-l", "a"]


def test_parse_line_empty():
    assert parse_line("\n") == []


def test_process_pid(shell):
    shell.process("pid\n")
    assert shell.stdout.getvalue() == f"pid:{os.getpid()}\n"


def test_unknown_command_raises(shell):
    with pytest.raises(UnknownCommandError) as info:
        shell.process("frobnicate now")
    assert info.value.command == "frobnicate"
    assert shell.history.is_empty()


def test_blank_line_is_unknown(shell):
    with pytest.raises(UnknownCommandError):
        shell.process("\n")


def test_commands_recorded_but_historic_is_not(shell):
    shell.process("pid")
    shell.process("historic")
    assert [e.line for e in shell.history] == ["pid"]


def test_historic_prints_history(shell):
    shell.process("pid")
    shell.process("authors -n")
    before = shell.stdout.getvalue()
    shell.process("historic")
    assert shell.stdout.getvalue()[len(before):] == shell.history.format()


def test_historic_limit(shell):
    shell.process("pid")
    shell.process("ppid")
    before = shell.stdout.getvalue()
    shell.process("historic -0")
    assert shell.stdout.getvalue()[len(before):] == shell.history.format(0)


def test_historic_repeats_entry(shell):
    shell.process("pid")
    shell.process("historic 0")
    assert shell.stdout.getvalue() == f"pid:{os.getpid()}\n" * 2
    assert len(shell.history) == 2


def test_historic_missing_position(shell):
    shell.process("pid")
    shell.process("historic 5")
    assert "5" in shell.stderr.getvalue()
    assert len(shell.history) == 1


def test_command_error_goes_to_stderr(shell):
    shell.process("authors -x")
    assert shell.stdout.getvalue() == ""
    assert "authors" in shell.stderr.getvalue()


def test_file_commands_are_recorded_silently(shell):
    shell.process("open somefile")
    assert shell.stdout.getvalue() == ""
    assert shell.history.last().parts == ("open", "somefile")


@pytest.mark.parametrize("word", ["bye", "exit", "quit"])
def test_quit_commands(shell, word):
    with pytest.raises(ShellExit) as info:
        shell.process(word)
    assert info.value.code == 0


def test_run_until_quit(shell):
    code = shell.run(io.StringIO("pid\nbye\npid\n"))
    assert code == 0
    out = shell.stdout.getvalue()
    assert out.startswith(PROMPT)
    assert out.count("pid:") == 1


def test_run_stops_at_end_of_input(shell):
    assert shell.run(io.StringIO("ppid\n")) == 0
    assert shell.stdout.getvalue().count(PROMPT) == 2


def test_run_unknown_command_fails(shell):
    assert shell.run(io.StringIO("nonsense\npid\n")) == 1
    assert "nonsense" in shell.stdout.getvalue()
    assert "pid:" not in shell.stdout.getvalue()