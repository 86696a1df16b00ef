import os
import shlex
from dataclasses import dataclass, field
from typing import List, Optional

from rush.config import DELIMITERS, PARALLEL_SEPARATOR, REDIRECT_TOKEN, REDIRECT_MODE
from rush.errors import RedirectionSyntaxError, RedirectionError


@dataclass
class Clause:
    """One command: its argument vector and optional output file."""
    argv: List[str] = field(default_factory=list)
    target: Optional[str] = None


@dataclass
class Group:
    """All clauses parsed from one input line."""
    clauses: List[str] = field(default_factory=list)
    parallel: bool = False


def tokenize(line, delimiters=DELIMITERS):
    """
    Split a line on whitespace.
    Quotes and backslashes are ordinary characters.
    Returns: list of non-empty tokens
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace = delimiters
    lex.whitespace_split = True
    lex.commenters = ""
    lex.quotes = ""
    lex.escape = ""
    return list(lex)


def split_clauses(line):
    """
    Split a line into clauses on the parallel separator.
    Returns: Group(clauses, parallel)
    """
    line = line.strip(DELIMITERS)

    if PARALLEL_SEPARATOR not in line:
        return Group([line] if line else [], parallel=False)

    clauses = []
    for part in line.split(PARALLEL_SEPARATOR):
        part = part.strip(DELIMITERS)
        if part:
            clauses.append(part)
    return Group(clauses, parallel=True)


def resolve_redirection(tokens):
    """
    Separate a trailing '> file' from the argument vector.
    Raises RedirectionSyntaxError for any other use of '>'.
    """
    count = tokens.count(REDIRECT_TOKEN)
    if count == 0:
        return Clause(list(tokens))

    idx = tokens.index(REDIRECT_TOKEN)
    if count > 1 or idx != len(tokens) - 2:
        raise RedirectionSyntaxError(f"bad redirection in {tokens!r}")
    if idx == 0:
        raise RedirectionSyntaxError("redirection without a command")

    return Clause(tokens[:idx], tokens[-1])


def open_redirect_target(path):
    """
    Open a redirection target write-only, created 0644 and truncated.
    Returns: raw file descriptor
    """
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, REDIRECT_MODE)
    except (OSError, ValueError) as e:
        raise RedirectionError(f"{path!r}: {e}") from e
