"""Command-line entry points: run commands between an input and an output file."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from .commands import HERE_DOC, PipexError, build_commands, check_argv
from .fmt import printf
from .lines import fill_here_doc
from .pipeline import open_files, run_pipeline
from .textutils import strncmp

PROG = "pipeline-redirect"


def _error() -> int:
    printf("Error\n")
    return 1


def _run(args: Sequence[str], *, bonus: bool) -> int:
    full = [PROG, *args]
    if (len(full) < 5) if bonus else (len(full) != 5):
        return _error()
    if not check_argv(full):
        return _error()
    env = dict(os.environ)
    try:
        with open_files(full) as ends:
            if bonus and strncmp(full[1], HERE_DOC, 8) == 0:
                fill_here_doc(full[2], sys.stdin, ends.infile)
            commands = build_commands(full, env)
            run_pipeline(commands, ends.infile, ends.outfile, env)
    except (PipexError, OSError):
        return _error()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile``: exactly two commands."""
    args = sys.argv[1:] if argv is None else list(argv)
    return _run(args, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Run any number of commands, or ``here_doc LIMITER cmd... outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    return _run(args, bonus=True)


if __name__ == "__main__":
    raise SystemExit(main())