"""
git.py

Responsibility: Run local git commands as blocking subprocesses.

Every command runs with the repository folder as its working directory.
A non-zero exit status raises `GitCommandError` carrying git's stderr verbatim.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "main"
DEFAULT_REMOTE = "origin"
INITIAL_COMMIT_MESSAGE = "Initial commit"


class GitError(RuntimeError):
    pass


class GitLaunchError(GitError):
    """git could not be started at all (missing executable, bad cwd, ...)."""


class GitCommandError(GitError):
    """git ran and exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str) -> None:
        super().__init__(f"{' '.join(command)} failed: {stderr}")
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class GitRunner:
    def __init__(self, executable: str = "git", env: Mapping[str, str] | None = None) -> None:
        self.executable = executable
        self.env = dict(env) if env is not None else None

    def run(self, *args: str, cwd: str | Path) -> str:
        """
        Run `git <args>` in `cwd` and return its stripped stdout.
        """
        cmd = [self.executable, *args]
        logger.debug("running %s in %s", " ".join(cmd), cwd)
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(cwd),
                env=self.env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise GitLaunchError(f"running {' '.join(cmd)}") from e

        if proc.returncode != 0:
            logger.debug("%s exited with status %d", " ".join(cmd), proc.returncode)
            raise GitCommandError(cmd, proc.returncode, proc.stderr)
        return proc.stdout.strip()

    def init(self, cwd: str | Path) -> str:
        return self.run("init", cwd=cwd)

    def add_all(self, cwd: str | Path) -> str:
        return self.run("add", ".", cwd=cwd)

    def commit(self, cwd: str | Path, message: str = INITIAL_COMMIT_MESSAGE) -> str:
        return self.run("commit", "-m", message, cwd=cwd)

    def add_remote(self, cwd: str | Path, url: str, name: str = DEFAULT_REMOTE) -> str:
        return self.run("remote", "add", name, url, cwd=cwd)

    def rename_branch(self, cwd: str | Path, branch: str = DEFAULT_BRANCH) -> str:
        return self.run("branch", "-M", branch, cwd=cwd)

    def push_upstream(self, cwd: str | Path, remote: str = DEFAULT_REMOTE, branch: str = DEFAULT_BRANCH) -> str:
        return self.run("push", "-u", remote, branch, cwd=cwd)
