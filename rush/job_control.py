import os

import psutil
from loguru import logger

from rush import config


def outstanding_children():
    """PIDs of the shell's live child processes"""
    try:
        return [p.pid for p in psutil.Process().children()]
    except psutil.Error:
        return []


def reap_all(handles=()):
    """
    Block until the shell has no child processes left, including ones
    that did not come from `handles`. Exit codes are recorded on the
    matching Popen objects.
    """
    by_pid = {p.pid: p for p in handles}
    while True:
        try:
            pid, status = os.wait()
        except ChildProcessError:
            break

        code = os.waitstatus_to_exitcode(status)
        proc = by_pid.pop(pid, None)
        if proc is not None:
            proc.returncode = code
        logger.debug(f"[{pid}] finished with {code}")


def reap_group(handles):
    """Block until every process in `handles` has terminated."""
    for proc in handles:
        code = proc.wait()
        logger.debug(f"[{proc.pid}] finished with {code}")


def wait_for_children(handles, policy=None):
    policy = policy or config.WAIT_POLICY
    if policy not in config.WAIT_POLICIES:
        raise ValueError(f"unknown wait policy {policy!r}")
    logger.opt(lazy=True).debug("waiting ({}) on {}", lambda: policy, outstanding_children)

    if policy == "group":
        reap_group(handles)
    else:
        reap_all(handles)
