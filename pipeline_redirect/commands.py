"""Argument checks and command lookup along the search path."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from .textutils import split_words, strncmp

HERE_DOC = "here_doc"


class PipexError(Exception):
    """Raised when the pipeline cannot be set up or run."""


@dataclass(frozen=True)
class Command:
    """One stage of the pipeline: its argument vector and resolved executable."""

    args: tuple[str, ...]
    path: str


def check_argv(argv: Sequence[str]) -> bool:
    """Return False if any argument but the last is an empty string."""
    return all(argv[:-1])


def search_paths(env: Mapping[str, str]) -> list[str]:
    """Return the directories listed in ``PATH``, empty entries dropped."""
    value = env.get("PATH")
    if value is None:
        raise PipexError("PATH is not set")
    return split_words(value, ":")


def check_path(cmd: str, prefix: str) -> str | None:
    """Return ``prefix/cmd`` if it is executable, otherwise None."""
    candidate = f"{prefix}/{cmd}"
    return candidate if os.access(candidate, os.X_OK) else None


def resolve_command(cmd: str, paths: Iterable[str]) -> str | None:
    """Return the first executable ``cmd`` found under ``paths``, or None."""
    for prefix in paths:
        found = check_path(cmd, prefix)
        if found is not None:
            return found
    return None


def build_commands(argv: Sequence[str], env: Mapping[str, str]) -> list[Command]:
    """Build the pipeline stages from the command-line arguments.

    The commands sit between the input argument and the output file; in
    here-document mode the limiter argument is skipped as well.
    """
    if len(argv) < 3:
        raise PipexError("not enough arguments")
    paths = search_paths(env)
    start = 3 if strncmp(argv[1], HERE_DOC, 8) == 0 else 2
    commands = []
    for text in argv[start:-1]:
        words = split_words(text, " ")
        if not words:
            raise PipexError(f"empty command: {text!r}")
        path = resolve_command(words[0], paths)
        if path is None:
            raise PipexError(f"command not found: {words[0]}")
        commands.append(Command(tuple(words), path))
    return commands