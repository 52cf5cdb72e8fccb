# minish

A small command shell. It reads one command per line, splits it into words,
and either handles it as a builtin (`exit`, `env`) or runs the program it
finds through `PATH`.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
minish
```

When standard input is a terminal it shows a `$ ` prompt. Commands can also
be piped in:

```
echo "ls -l /tmp" | minish
```

The shell stops at end of input (Ctrl-D) with status 0, or when `exit` runs.

### How a line is handled

- Everything from the first `#` on is a comment and is dropped.
- A line that contains `$$` is not run: the shell's process id is written to
  standard error instead.
- Words are separated by spaces, tabs and newlines. Lines with no words are
  ignored.
- Words are expanded before the command runs: `$?` becomes `0`, and `$NAME`
  becomes the value of the environment variable `NAME` (it is left as written
  when `NAME` is unset).
- A command containing `/` is run if that path exists. Any other command is
  looked up in each directory of `PATH`, in order. When `PATH` is unset or
  empty, no command is found at all.
- A command that cannot be found prints
  `<shell>: <n>: <command>: Not found` on standard error, where `<shell>` is
  the name the shell was started as and `<n>` counts the lines read so far.

### Builtins

- `exit [status]`: leave the shell. The status is the leading number of the
  argument (0 if it has none), or 0 without an argument. The process exit
  code is that status modulo 256.
- `env`: print the environment, one `NAME=value` per line.

### The simple shell

A second, plainer shell is included:

```
minish-simple
```

It shows a `#cisfun$ ` prompt on a terminal, splits lines on spaces, tabs,
carriage returns, newlines and bell characters, and supports `exit` and
`env`. Commands may also be given as arguments, one command per argument:

```
minish-simple "ls /" "env"
```

Differences from `minish`:

- Programs are started with an empty environment.
- Names starting with `/` are run as given; other names are tried in each
  directory of `PATH`, or of `/bin:/usr/bin` when `PATH` is unset. If none
  can be started, `./shell: No such file or directory` is printed on standard
  output.
- `exit` with an argument that is not a number prints
  `Error: exit: <arg>: numeric argument required` and exits with status 1.
- There is no comment handling and no variable expansion.

## Using it from Python

```python
from minish.text import tokenize
from minish.paths import find_command
from minish.shell import Shell

tokenize("ls   -l\t/tmp\n")                 # ['ls', '-l', '/tmp']
find_command("ls", {"PATH": "/usr/bin:/bin"})  # a path such as '/usr/bin/ls', or None
```

`Shell` takes its input, output and error streams, environment and process
id as arguments; `Shell.step()` runs one line and `Shell.run()` runs until
input ends or `exit` is called, returning the status.

## What it does not do

There are no pipes, redirections, quoting, `;` or `&&` lists, background jobs,
globbing or `cd`. Neither shell keeps the exit status of the last program:
`$?` always expands to `0`.

## Running the tests

```
pip install .[test]
pytest
```