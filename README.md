# pipex

`pipex` runs a chain of commands. The first command reads from a file and the
last one writes to a file, the way a shell does with `<`, `|` and `>`.

## Installing

```
pip install .
```

This installs the `pipex` command.

## Usage

Give two or more commands between an input file and an output file:

```
pipex infile "grep foo" "wc -l" outfile
```

This behaves like

```
< infile grep foo | wc -l > outfile
```

The output file is created with mode `0644` if it is missing, and truncated
if it exists. You can give any number of commands:

```
pipex infile "cat" "sort" "uniq -c" outfile
```

If the input file cannot be opened, `No such file or directory` is written to
standard error and no command is run.

### Here-document input

When the first argument is `here_doc`, the next argument is a limiter. Lines
are read from standard input until the limiter line. A limiter line starts
with the limiter and has exactly one more character, normally the newline.
The text read so far feeds the first command. End of input also ends the
document. In this form the output file is appended to, not truncated:

```
pipex here_doc END "cat" "wc -l" outfile
```

This behaves like

```
cat << END | wc -l >> outfile
```

Both forms need at least two commands. If there are too few arguments, a
usage message is written to standard error.

### How commands are found

Each command string is split on spaces, and repeated spaces are collapsed.
The first word is looked up in the directories of `PATH`, in order, and the
first executable `dir/word` found is run with the remaining words as its
arguments.

A command fails to start in these cases:

- it is blank;
- it is not found on `PATH`;
- the environment is empty.

In each case a message is written to standard error:

- `execve : Command not found` when the command is blank or not on `PATH`;
- `Env error` when the environment is empty.

The other commands still run. A command that follows one that failed to start
reads empty input.

The `pipex` command exits with status 0 in every case, errors included.

## What it does not do

Commands are not passed through a shell. Quotes, escapes, globs, variables
and redirections inside a command string are not interpreted. A command name
that contains a slash is not run as a path; it is always joined to the `PATH`
directories.

## Using it from Python

- `pipex.cli.run(argv, env, stdin, stderr)` runs the whole program with
  explicit arguments (without the program name), environment and streams.
  `pipex.cli.main(argv=None)` runs it with the process's own arguments and
  streams.
- `pipex.pipeline.parse_args(argv, env)` builds a `Pipeline` or raises
  `UsageError`.
- `Pipeline` exposes these methods:
  - `Pipeline.run(stdin)` runs every command. It returns, for each command in
    order, either its exit status or the `PipexError` that kept it from
    starting.
  - `Pipeline.open_input` and `Pipeline.open_output` open the two ends of the
    pipeline.
- `pipex.pathsearch` provides three lookups:
  - `getenv(name, env)` reads a variable.
  - `find_command(name, env)` locates an executable along `PATH`.
  - `resolve_command(command, env)` splits a command string and locates its
    program.
  
  In each of them, `env` may be a mapping or a list of `NAME=value` strings.
- `pipex.heredoc` provides `iter_lines(stream)` and
  `read_heredoc(stream, limiter)`.
- `pipex.errors` defines these exceptions:
  - `PipexError`, the base class;
  - `UsageError`;
  - `EnvError`;
  - `CommandNotFoundError`.

Some small helpers with C-library semantics are also included:

- `pipex.chars` provides character classification, case mapping, `atoi` and
  `itoa`.
- `pipex.memory` provides byte-buffer routines such as `memset`, `memcpy` and
  `memmove`.
- `pipex.text` provides string routines such as `split`, `strncmp`, `strlcpy`
  and `strnstr`. It returns indices, or `None` for "not found".
- `pipex.linkedlist` provides a singly linked `LinkedList` of `Node`s.
- `pipex.output` writes characters, strings and numbers to file descriptors.

## Running the tests

```
pip install .[test]
pytest
```