"""Opening the end files and running the commands connected by pipes."""

from __future__ import annotations

import contextlib
import os
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from .commands import HERE_DOC, Command, PipexError
from .textutils import strncmp

_MODE = 0o644


@dataclass
class Endpoints:
    """The descriptors feeding the first command and taking the last one's output."""

    infile: int
    outfile: int
    here_doc: bool = False

    def close(self) -> None:
        """Close both descriptors and remove the here-document file if one was used."""
        for name in ("infile", "outfile"):
            fd = getattr(self, name)
            if fd >= 0:
                with contextlib.suppress(OSError):
                    os.close(fd)
                setattr(self, name, -1)
        if self.here_doc:
            with contextlib.suppress(OSError):
                os.unlink(HERE_DOC)
            self.here_doc = False

    def __enter__(self) -> Endpoints:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _open(path: str, flags: int) -> int:
    try:
        return os.open(path, flags, _MODE)
    except OSError as exc:
        raise PipexError(f"cannot open {path}: {exc.strerror}") from exc


def open_files(argv: Sequence[str]) -> Endpoints:
    """Open the input and output files named by the first and last arguments.

    Normally the input is opened for reading and the output truncated. When
    the input argument starts with ``here``, the input is opened for appending
    so a here-document can be written to it, and the output is appended to.
    """
    if len(argv) < 3:
        raise PipexError("not enough arguments")
    infile, outfile = argv[1], argv[-1]
    if strncmp(infile, HERE_DOC, 4) != 0:
        in_flags = os.O_RDONLY
        out_flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
    else:
        in_flags = os.O_WRONLY | os.O_CREAT | os.O_APPEND
        out_flags = os.O_WRONLY | os.O_CREAT | os.O_APPEND
    in_fd = _open(infile, in_flags)
    try:
        out_fd = _open(outfile, out_flags)
    except PipexError:
        os.close(in_fd)
        raise
    return Endpoints(in_fd, out_fd, strncmp(infile, HERE_DOC, 8) == 0)


def _spawn(command: Command, stdin: int, stdout: int,
           env: Mapping[str, str] | None) -> subprocess.Popen:
    try:
        return subprocess.Popen(
            list(command.args),
            executable=command.path,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise PipexError(f"cannot run {command.path}: {exc}") from exc


def run_pipeline(commands: Sequence[Command], infile: int, outfile: int,
                 env: Mapping[str, str] | None = None) -> list[int]:
    """Run ``commands`` chained by pipes from ``infile`` to ``outfile``.

    Waits for every command in order and returns their exit codes.
    """
    processes: list[subprocess.Popen] = []
    prev = infile
    last_index = len(commands) - 1
    try:
        for index, command in enumerate(commands):
            if index == last_index:
                try:
                    processes.append(_spawn(command, prev, outfile, env))
                finally:
                    if prev != infile:
                        os.close(prev)
                break
            read_end, write_end = os.pipe()
            try:
                processes.append(_spawn(command, prev, write_end, env))
            except BaseException:
                os.close(read_end)
                raise
            finally:
                os.close(write_end)
                if prev != infile:
                    os.close(prev)
            prev = read_end
    except BaseException:
        for process in processes:
            process.wait()
        raise
    return [process.wait() for process in processes]