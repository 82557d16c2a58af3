"""
Pytest fixtures for checkwatch tests.

No test spawns a real cargo: process creation goes through FakePopen.
"""

import pytest

from checkwatch import runner


class FakePopen:
    """Records each spawn and replays scripted wait() outcomes."""

    def __init__(self, outcomes=(0,)):
        self.outcomes = list(outcomes)
        self.calls = []
        self.wait_calls = 0

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        return self

    def wait(self):
        self.wait_calls += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class MissingProgramPopen:
    def __init__(self):
        self.calls = []

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        raise FileNotFoundError(2, "No such file or directory", argv[0])


@pytest.fixture
def fake_popen():
    return FakePopen()


@pytest.fixture
def patch_popen(monkeypatch):
    """Install a FakePopen (or any callable) in place of subprocess.Popen."""

    def _install(fake):
        monkeypatch.setattr(runner.subprocess, "Popen", fake)
        return fake

    return _install
