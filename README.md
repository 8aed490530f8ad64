# pipex

`pipex` runs two commands connected by a pipe. The first command reads from
an input file and its output goes to the second command, which writes to an
output file. It behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments. With any other number it prints a
usage line to standard error and exits with status 1.

Each command string is split on spaces, and empty words are dropped. The
program named by the first word is found in this order:

1. If the first word names an executable file as written, that file runs.
2. If not, the directories in `PATH` are searched in order. The search uses
   the first environment variable whose name begins with `PATH`.

Before anything runs, `pipex` checks the output file. If the file already
exists and is not writable, it prints `<outfile>: Permission denied` to
standard error and exits with status 1.

Each stage fails on its own:

- If the input file cannot be opened or the first command is not found, the
  first command does not run. The second command then reads an empty pipe.
- The output file is created if it does not exist and truncated if it does.
  New files get mode `0644`. If the output file cannot be opened or the
  second command is not found, the exit status is 1.

Otherwise the exit status is the exit status of the second command. If that
command is killed by a signal, the status is 0.

Example:

```sh
pipex /etc/passwd "grep root" "wc -l" count.txt
```

## Library use

The same pipeline can be run from Python:

```python
from pipex.cli import run_pipeline, PipexError

status = run_pipeline("input.txt", "sort", "uniq -c", "out.txt", {"PATH": "/usr/bin:/bin"})
```

If `environ` is omitted, the current process environment is used.
`run_pipeline` raises `PipexError` when the output file exists but is not
writable.

Other modules:

- `pipex.command` has the lookup helpers:
  - `search_paths(environ)` returns the `PATH` directories.
  - `find_path(cmd, paths)` resolves a command.
  - `is_valid_cmd(cmd, paths)` searches only the given directories.
- `pipex.lines` reads input one line at a time:
  - `LineReader` reads from any object with a `read(size)` method, in chunks of `buffer_size`.
  - `get_next_line(fd)` reads from a raw file descriptor and keeps a separate buffer for each descriptor.
- `pipex.strings`, `pipex.chars`, `pipex.memory` and `pipex.output` hold small string, character, byte-buffer and output helpers.

## Limitations

- Quotes, escapes and other shell syntax in command strings are not
  interpreted. Commands are split on spaces only.
- Exactly two commands are supported. There is no here-document mode and no
  appending to the output file.
- When a command cannot be found or a file cannot be opened, no message is
  printed. The only sign of the failure is the exit status.

## Tests

```sh
pip install ".[test]"
pytest
```