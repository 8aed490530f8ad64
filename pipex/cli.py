"""Run "< infile cmd1 | cmd2 > outfile" with two commands joined by a pipe."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import Mapping, Sequence

from pipex.command import find_path, search_paths
from pipex.output import put_endl
from pipex.strings import split

USAGE = "How to use: ./pipex [input] [cmd1] [cmd2] [output]"


class PipexError(Exception):
    """The pipeline could not be set up."""


def _resolve(command: str, paths: list[str]) -> tuple[str, list[str]] | None:
    argv = split(command, " ")
    if not argv:
        return None
    program = find_path(argv[0], paths)
    if program is None:
        return None
    return program, argv


def _start_first(
    infile: str, command: str, paths: list[str], env: dict[str, str], write_end: int
) -> subprocess.Popen | None:
    try:
        source = open(infile, "rb")
    except OSError:
        return None
    with source:
        resolved = _resolve(command, paths)
        if resolved is None:
            return None
        program, argv = resolved
        try:
            return subprocess.Popen(
                argv, executable=program, stdin=source, stdout=write_end, env=env
            )
        except OSError:
            return None


def _run_second(
    outfile: str, command: str, paths: list[str], env: dict[str, str], read_end: int
) -> int:
    try:
        sink = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError:
        return 1
    try:
        resolved = _resolve(command, paths)
        if resolved is None:
            return 1
        program, argv = resolved
        try:
            process = subprocess.Popen(
                argv, executable=program, stdin=read_end, stdout=sink, env=env
            )
        except OSError:
            return 1
    finally:
        os.close(sink)
    # A command killed by a signal reports no exit code of its own.
    return max(process.wait(), 0)


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Feed infile through first and second into outfile; return second's status.

    Commands are split on spaces and looked up through PATH in environ.
    A stage whose file cannot be opened or whose command cannot be found
    does not run; a failed second stage yields status 1.
    """
    env = dict(os.environ if environ is None else environ)
    if os.path.exists(outfile) and not os.access(outfile, os.W_OK):
        raise PipexError(f"{outfile}: {os.strerror(errno.EACCES)}")
    paths = search_paths(env)
    read_end, write_end = os.pipe()
    try:
        first_process = _start_first(infile, first, paths, env, write_end)
    finally:
        os.close(write_end)
    try:
        status = _run_second(outfile, second, paths, env, read_end)
    finally:
        os.close(read_end)
    if first_process is not None:
        first_process.wait()
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: pipex INFILE CMD1 CMD2 OUTFILE."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        put_endl(USAGE, sys.stderr)
        return 1
    try:
        return run_pipeline(*args)
    except PipexError as error:
        put_endl(str(error), sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())