# pipeline_redirect

Run a chain of programs so that the first one reads from a file, each one
feeds the next, and the last one writes to a file. It does the same as this
shell line:

```
< infile cmd1 | cmd2 > outfile
```

Commands are found by searching the directories listed in `PATH`. Each
command argument is split on spaces into the program name and its
arguments. No shell quoting is applied.

## Installation

```
pip install .
```

## Two commands

`pipeline-redirect` takes exactly two commands:

```
pipeline-redirect infile "grep foo" "wc -l" outfile
```

The output file is created if missing (mode 0644) and truncated first.
`python -m pipeline_redirect.cli` runs the same command.

## Any number of commands

`pipeline-redirect-multi` takes one or more commands:

```
pipeline-redirect-multi infile "cat" "sort" "uniq -c" outfile
```

### Here-document mode

When the first argument is `here_doc`, the second is a limiter:

```
pipeline-redirect-multi here_doc END "cat" "wc -l" outfile
```

Lines are read from standard input until a line starts with the limiter, or
input ends. They are appended to a file named `here_doc` in the current
directory, which is removed when the run is over. The output file is
appended to instead of truncated.

The `here_doc` file is opened for writing only, and that same descriptor is
handed to the first command as its standard input. The first command
therefore cannot read the stored lines back. An input argument that merely
starts with `here` also opens both files in append mode.

## Exit status and errors

Both commands exit with status 0 once every command has finished. The exit
statuses of the commands themselves are not reported.

They print `Error` to standard output and exit with status 1 in these cases:

- the wrong number of arguments is given;
- an argument other than the last is empty;
- a file cannot be opened;
- `PATH` is missing from the environment;
- a command argument holds only spaces;
- a command cannot be found or is not executable;
- a command cannot be started.

## Use as a library

`pipeline_redirect.commands` checks arguments and resolves commands,
`pipeline_redirect.pipeline` opens the end files and runs the chain:

```python
from pipeline_redirect.commands import build_commands
from pipeline_redirect.pipeline import open_files, run_pipeline

env = {"PATH": "/usr/bin:/bin"}
argv = ["prog", "in.txt", "sort", "uniq", "out.txt"]
commands = build_commands(argv, env)
with open_files(argv) as ends:
    codes = run_pipeline(commands, ends.infile, ends.outfile, env)
```

- `build_commands(argv, env)` returns a list of `Command` objects, each with
  `args` and the resolved `path`.
- `check_argv(argv)`, `search_paths(env)`, `check_path(cmd, prefix)` and
  `resolve_command(cmd, paths)` are the steps it is built from.
- `open_files(argv)` returns an `Endpoints` with `infile` and `outfile`
  descriptors; `close()` (or leaving the `with` block) closes them and
  removes the `here_doc` file when one was used.
- `run_pipeline(commands, infile, outfile, env=None)` waits for every
  command and returns their exit codes in order.

These functions raise `PipexError` on failure instead of exiting.

Other helpers:

- `pipeline_redirect.lines`: `read_lines(stream)` yields lines from a file
  descriptor (as bytes) or a file object; `fill_here_doc(limit, source,
  target)` copies lines until one starts with `limit` and returns how many it
  copied.
- `pipeline_redirect.textutils`: `split_words(text, sep)` splits on one
  character and drops empty pieces; `strncmp(first, second, n)` compares at
  most `n` bytes.
- `pipeline_redirect.fmt`: `format_printf(template, *args)` expands
  `%c %s %p %d %i %u %x %X %%` with 32-bit integer semantics (64-bit for
  `%p`); `printf(template, *args, file=None)` writes the result and returns
  its length.