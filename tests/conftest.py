import os
import stat

import pytest

from rush.log import setup_logging
from rush.registry import PathRegistry
from rush.shell import Shell


@pytest.fixture(autouse=True)
def quiet_logging():
    setup_logging(log_file=None)


@pytest.fixture
def bindir(tmp_path):
    """Directory of small executable scripts usable as external commands."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_script(bindir):
    def _make(name, body, directory=None, executable=True):
        script = (directory or bindir) / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        if executable:
            script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script
    return _make


@pytest.fixture
def shell(bindir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return Shell(PathRegistry([str(bindir)]))


@pytest.fixture
def umask_022():
    old = os.umask(0o022)
    yield
    os.umask(old)
