import sys

from loguru import logger

from rush import config
from rush.builtin import execute_builtin
from rush.errors import ShellError, print_error
from rush.executor import launch
from rush.history import init_readline, load_history, save_history
from rush.job_control import wait_for_children
from rush.parser import tokenize, split_clauses, resolve_redirection
from rush.registry import PathRegistry


class Shell:
    """
    Runs input lines: splits them into clauses, dispatches built-ins,
    launches external commands and waits for them.
    """

    def __init__(self, registry=None, wait_policy=None):
        self.registry = registry if registry is not None else PathRegistry()
        self.wait_policy = wait_policy or config.WAIT_POLICY
        if self.wait_policy not in config.WAIT_POLICIES:
            raise ValueError(f"unknown wait policy {self.wait_policy!r}")

    def run_clause(self, text):
        """
        Run one clause.
        Returns: Popen object, or None if nothing was launched
        """
        tokens = tokenize(text)
        if not tokens:
            return None

        try:
            if execute_builtin(tokens, self.registry):
                return None
            clause = resolve_redirection(tokens)
            return launch(clause, self.registry)
        except ShellError as e:
            print_error(e)
            return None

    def run_line(self, line):
        """
        Run every clause of a line, then wait.
        Returns: list of Popen objects launched for this line
        """
        group = split_clauses(line)
        logger.debug(f"clauses={group.clauses} parallel={group.parallel}")

        handles = []
        for text in group.clauses:
            proc = self.run_clause(text)
            if proc is not None:
                handles.append(proc)

        wait_for_children(handles, self.wait_policy)
        return handles

    def main_loop(self):
        # Undecodable bytes pass through to argv and paths unchanged.
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="surrogateescape")

        interactive = init_readline()
        if interactive:
            load_history()

        try:
            while True:
                try:
                    line = input(config.PROMPT)
                except EOFError:
                    break
                except KeyboardInterrupt:
                    print()
                    continue
                except UnicodeDecodeError as e:
                    print_error(e)
                    continue

                try:
                    self.run_line(line)
                except KeyboardInterrupt:
                    print()
        finally:
            if interactive:
                save_history()
            sys.stdout.flush()
