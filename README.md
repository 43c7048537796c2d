# minishell

A small interactive shell that understands a fixed set of built-in commands
and keeps a history of what you have typed.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minishell
```

It shows the prompt `$>` and reads one command per line. Words are separated
by spaces; the first word is the command and the second, if any, its option.
These commands are available:

| Command                 | What it does                                                        |
|-------------------------|---------------------------------------------------------------------|
| `authors [-n\|-l]`      | Print the author's name and e-mail (`-n` name only, `-l` e-mail only) |
| `pid`                   | Print the shell's process id                                        |
| `ppid`                  | Print the parent process id                                         |
| `cd [dir]`              | Print the working directory, or change to `dir`                     |
| `date [-t\|-d]`         | Print the time and date (`-t` time only, `-d` date only)            |
| `historic`              | List every command recorded so far, numbered from 0                 |
| `historic N`            | Run command number `N` from the history again                       |
| `historic -N`           | List history entries 0 through `N`                                  |
| `open`, `close`, `dup`  | Accepted and recorded in the history; they do nothing else          |
| `infosys`               | Print the system name, node name, release, version and machine      |
| `help`                  | Print the names of all commands                                     |
| `bye`, `exit`, `quit`   | Leave the shell                                                     |

Every command except `historic` is recorded in the history. Errors from a
command, such as an unknown option or a directory that cannot be entered,
are written to standard error and the shell carries on. An unknown command
ends the shell with exit status 1; end of input ends it with status 0.

## Using it from Python

```python
import io
from minishell.shell import Shell, ShellExit

out = io.StringIO()
shell = Shell(stdout=out, stderr=io.StringIO())
shell.process("authors -n")
shell.process("historic")
print(out.getvalue())
```

`Shell.process` runs one line; it raises `UnknownCommandError` for an unknown
command and `ShellExit` for `bye`, `exit` or `quit`. `Shell.run` reads lines
from any text stream until it ends or a quit command is seen, and returns the
exit status. `minishell.shell.parse_line` splits a line into its words.

The built-in commands live in `minishell.commands` as functions that return
the text they print and raise `CommandError` on failure; `date` accepts a
`datetime` to format in place of the current time.

`minishell.historic.History` holds the command history as `HistoryEntry`
items, and `minishell.filelist.FileList` is a table of `FileEntry` items
(descriptor and mode). Both can be used on their own.

## Limitations

`open`, `close` and `dup` do not open, close or duplicate anything: they are
only recorded in the history. The `FileList` table exists but no command
fills it.

## Running the tests

```
pip install ".[test]"
pytest
```