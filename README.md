# xshell

A small interactive shell for POSIX systems. It reads one line at a time,
runs it and prompts again. It stops when you type `exit` or send end-of-file.

## Installing

    pip install .

## Running

    xshell

The prompt shows your user name and the shell's host name:

    alice@x_shell>

The `USER` environment variable must be set. If it is not, the shell prints
`Error getting username` and exits with status 1. The command takes no options
apart from `-h`/`--help`.

## What a line can hold

Each line is handled in exactly one of the forms below. The shell checks for
them in this order and uses the first one that appears anywhere in the line:

| Form | Example | Behaviour |
|------|---------|-----------|
| Pipeline | `ls -l \| grep py \| wc -l` | Each command's output feeds the next one's input. At most 11 commands. The line succeeds only if every command succeeds. |
| And-list | `mkdir out && cd out` | Commands run in order and the list stops at the first one that does not succeed. |
| List | `cd /tmp; ls` | Commands run in order whatever their results. The list stops only on `exit`. |
| Simple command | `ls -a` | A single command. |

Words are separated by spaces and tabs. A command keeps at most 63 words. The
shell does no quoting, globbing or variable expansion, and a line holds only
one of the forms above. For example, a line that contains `|` is always
treated as a pipeline.

Redirections go inside a single command:

    sort < names.txt > sorted.txt
    echo done >> log.txt

`<` reads standard input from a file. `>` writes standard output to a file and
empties it first. `>>` appends to a file. Output files are created with mode
0644 if they do not exist yet. Only the first `<`, `>` and `>>` in a command
are treated as redirections. If a command has both `>` and `>>`, the `>` file
is still created and emptied, but the output goes to the `>>` file.

## Built-in commands

- `cd [dir]`: changes the working directory. With no argument, or with `~`,
  it goes to `$HOME`. Inside a pipeline it does not change the shell's own
  directory.
- `hostname`: prints the shell's host name, `x_shell`.
- `history`: lists the last 100 non-empty lines entered, numbered from 1. The
  list includes the `history` line itself.
- `exit`: prints `Goodbye!` and leaves the shell.

Ctrl-C prints a new line and does not end the shell.

## Using it from Python

The same behaviour is available as a library:

```python
from xshell.execute import Status
from xshell.history import History
from xshell.shell import handle_input

history = History()
status = handle_input("echo hello | tr a-z A-Z", "x_shell", history)
assert status is Status.OK
handle_input("history", "x_shell", history)
```

The modules are:

- `xshell.shell`: `main(argv=None)` runs the interactive loop.
  `handle_input(line, hostname, history)` records and runs one line.
  `prompt(user, hostname)` builds the prompt string.
- `xshell.compound`: `run_line(line, hostname)` runs one line without keeping
  history. `run_pipeline`, `run_sequence` and `run_separate` run a list of
  command strings in one of the forms above. `tokenize(text)` splits a command
  into words.
- `xshell.execute`: `run_command(args, hostname, stdin=None, stdout=None)`
  runs one tokenized command, built-in or external. It returns a `Status`:
  `OK`, `EXIT` or `ERROR`.
- `xshell.redirect`: `split_redirects(args)` separates a command's arguments
  from its redirections and returns a `Redirects` object. `open_redirects` is
  a context manager that opens the redirection files. It raises
  `RedirectError` when a redirection is malformed or a file cannot be opened.
- `xshell.history`: `History` keeps the most recent commands, 100 by default.
  It supports `add`, `render`, iteration and `len`.
- `xshell.signals`: `install_sigint_handler()` makes Ctrl-C print a new line.
  It returns the handler that was installed before.

## What it does not do

There is no job control or background execution (`&`), no quoting, no
globbing, no environment variable expansion, no scripting and no line editing.
History is kept only in memory for the current session and is not saved to a
file. An input line is read in chunks of at most 1023 characters.

## Tests

    pip install .[test]
    pytest