from __future__ import annotations

import subprocess
from unittest.mock import MagicMock

import pytest


class FakeGit:
    """Records git commands; fails the command whose first arg is `fail_on`."""

    def __init__(self, fail_on: str | None = None, stderr: str = "fatal: boom") -> None:
        self.calls: list[list[str]] = []
        self.fail_on = fail_on
        self.stderr = stderr

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        rc = 1 if self.fail_on is not None and cmd[1] == self.fail_on else 0
        return subprocess.CompletedProcess(cmd, rc, stdout="", stderr=self.stderr if rc else "")


def make_response(status_code: int, body: str, json_data=None) -> MagicMock:
    r = MagicMock()
    r.status_code = status_code
    r.text = body
    if json_data is None:
        r.json.side_effect = ValueError("not json")
    else:
        r.json.return_value = json_data
    return r


@pytest.fixture
def fake_git(monkeypatch: pytest.MonkeyPatch) -> FakeGit:
    fake = FakeGit()
    monkeypatch.setattr("gh_repo_create.git.subprocess.run", fake)
    return fake
