"""
Exceptions raised while running a clause.

The class only reaches the debug log; the user always sees ERROR_MESSAGE.
"""

import sys

from loguru import logger

from rush.config import ERROR_MESSAGE


class ShellError(Exception):
    """Base class for every error that abandons a clause."""


# ---------- Syntax ----------
class ShellSyntaxError(ShellError):
    pass


class RedirectionSyntaxError(ShellSyntaxError):
    """'>' is not followed by exactly one trailing filename."""


class BuiltinArityError(ShellSyntaxError):
    """A built-in got the wrong number of arguments."""


# ---------- Resources ----------
class ShellResourceError(ShellError):
    pass


class RedirectionError(ShellResourceError):
    """The redirection target could not be opened for writing."""


class SpawnError(ShellResourceError):
    """The child process could not be created."""


class CommandNotFoundError(ShellResourceError):
    """No directory in the path registry holds a runnable command."""


# ---------- Usage ----------
class ShellUsageError(ShellError):
    pass


class ChangeDirectoryError(ShellUsageError):
    """The working directory could not be changed."""


class ExitUsageError(ShellUsageError):
    """`exit` was given arguments."""


def print_error(exc=None):
    """Write the fixed diagnostic to stderr."""
    if exc is not None:
        logger.warning(f"{type(exc).__name__}: {exc}")
    print(ERROR_MESSAGE, end="", file=sys.stderr, flush=True)
