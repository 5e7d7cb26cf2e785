"""Line reading and here-document filling."""

from __future__ import annotations

import os
from typing import IO, Iterator, Union

from .textutils import strncmp

Stream = Union[int, IO[str], IO[bytes]]


def _fd_lines(fd: int) -> Iterator[bytes]:
    # One byte at a time so nothing past the current line is consumed.
    pending = bytearray()
    while chunk := os.read(fd, 1):
        pending += chunk
        if chunk == b"\n":
            yield bytes(pending)
            pending.clear()
    if pending:
        yield bytes(pending)


def _stream_lines(stream: IO) -> Iterator:
    while line := stream.readline():
        yield line


def read_lines(stream: Stream) -> Iterator:
    """Yield lines from a file descriptor or file object.

    Each line keeps its trailing newline; a final line without one is yielded
    as is. Lines read from a descriptor are bytes.
    """
    if isinstance(stream, int):
        if stream < 0:
            raise ValueError("invalid file descriptor")
        return _fd_lines(stream)
    return _stream_lines(stream)


def _write(target: Stream, line) -> None:
    if isinstance(target, int):
        data = line.encode("utf-8") if isinstance(line, str) else line
        while data:
            written = os.write(target, data)
            data = data[written:]
    else:
        target.write(line)


def fill_here_doc(limit: str, source: Stream, target: Stream) -> int:
    """Copy lines from ``source`` to ``target`` until one starts with ``limit``.

    The limiter line itself is not copied. Copying also ends when the source
    is exhausted. Returns the number of lines copied.
    """
    size = len(limit.encode("utf-8"))
    copied = 0
    for line in read_lines(source):
        if strncmp(line, limit, size) == 0:
            break
        _write(target, line)
        copied += 1
    return copied