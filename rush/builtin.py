import os
import sys

from loguru import logger

from rush.errors import BuiltinArityError, ChangeDirectoryError, ExitUsageError


def builtin_exit(args, registry):
    """Terminate the shell"""
    if args:
        raise ExitUsageError(f"exit takes no arguments, got {args!r}")
    logger.debug("exit")
    sys.exit(0)


def builtin_cd(args, registry):
    """Change directory"""
    if len(args) != 1:
        raise BuiltinArityError(f"cd takes exactly one argument, got {len(args)}")
    try:
        os.chdir(args[0])
    except (OSError, ValueError) as e:
        raise ChangeDirectoryError(f"cd {args[0]!r}: {e}") from e


def builtin_path(args, registry):
    """Replace the executable search path"""
    registry.reset_and_set(args)


BUILTINS = {
    "exit": builtin_exit,
    "cd": builtin_cd,
    "path": builtin_path,
}


def execute_builtin(tokens, registry):
    """
    Execute built-in command if the first token names one.
    Returns: True if handled, False if the clause is external
    """
    if not tokens:
        return False

    handler = BUILTINS.get(tokens[0])
    if handler is None:
        return False

    handler(tokens[1:], registry)
    return True
