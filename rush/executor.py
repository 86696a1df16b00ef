import os
import subprocess
import sys

from loguru import logger

from rush.errors import CommandNotFoundError, SpawnError
from rush.parser import open_redirect_target


def run_external(argv, registry, stdout=None):
    """
    Try each registry candidate for argv[0] until one executes.
    Returns: Popen object
    """
    for candidate in registry.resolve(argv[0]):
        try:
            proc = subprocess.Popen(argv, executable=candidate, stdout=stdout)
        except OSError as e:
            # Exec failures carry the executable as filename; a failed fork has none.
            if e.filename is None:
                raise SpawnError(f"could not start '{argv[0]}': {e}") from e
            logger.debug(f"{candidate}: {e.strerror}")
            continue
        except ValueError as e:
            # Embedded NUL in the candidate or an argument.
            logger.debug(f"{candidate!r}: {e}")
            continue

        logger.debug(f"[{proc.pid}] started {candidate} {argv[1:]}")
        return proc

    raise CommandNotFoundError(f"'{argv[0]}' not found in {registry.directories}")


def launch(clause, registry):
    """
    Launch an external clause, with its stdout replaced by the
    redirection target if it has one. Does not wait.
    Returns: Popen object
    """
    sys.stdout.flush()

    if clause.target is None:
        return run_external(clause.argv, registry)

    fd = open_redirect_target(clause.target)
    try:
        return run_external(clause.argv, registry, stdout=fd)
    finally:
        os.close(fd)
