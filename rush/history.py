import os
import sys

import readline
from loguru import logger

from rush import config


def init_readline():
    """Set up line editing when attached to a terminal"""
    if not sys.stdin.isatty():
        return False

    try:
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")
        readline.parse_and_bind("set editing-mode emacs")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)
    return True


def history_lines():
    """Lines currently held in the readline history, oldest first"""
    return [readline.get_history_item(i)
            for i in range(1, readline.get_current_history_length() + 1)]


def save_history(path=None):
    """Write the session history, keeping the newest MAX_HISTORY lines."""
    path = path or config.HISTORY_FILE
    readline.set_history_length(config.MAX_HISTORY)
    try:
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save history to {path}: {e.strerror}", file=sys.stderr)
        return False
    logger.debug(f"saved {len(history_lines())} history lines to {path}")
    return True


def load_history(path=None):
    """Replace the session history with the lines stored in `path`."""
    path = path or config.HISTORY_FILE
    readline.clear_history()
    if not os.path.exists(path):
        return False
    try:
        readline.read_history_file(path)
    except OSError as e:
        print(f"Warning: Could not load history from {path}: {e.strerror}", file=sys.stderr)
        return False
    return True
