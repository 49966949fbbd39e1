"""
Pytest configuration and shared fixtures for ccsh tests.
"""

import signal

import pytest

from ccsh.history import History
from ccsh.shell import ShellSession


@pytest.fixture
def tmp_cwd(tmp_path, monkeypatch):
    """Run the test inside a throwaway directory; cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "history.txt"


@pytest.fixture
def session(history_file):
    return ShellSession(History(), str(history_file))


@pytest.fixture
def restore_sigint():
    """Put back whatever SIGINT handler pytest had installed."""
    previous = signal.getsignal(signal.SIGINT)
    yield
    signal.signal(signal.SIGINT, previous)
