"""
pipeline.py

Responsibility: Run one repository setup as an ordered list of fallible steps.

    START -> DIR_CREATED -> README_WRITTEN -> VCS_INITIALIZED -> COMMITTED
          -> REMOTE_CREATED -> REMOTE_CONFIGURED -> BRANCH_RENAMED -> PUSHED -> DONE

Each step runs at most once. The first failure stops the run in FAILED and is
raised as a `StepError` chained to the original exception. Completed steps are
not undone (a remote created before a failed push stays on GitHub).
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from gh_repo_create.config import Settings
from gh_repo_create.git import GitRunner
from gh_repo_create.github_client import GitHubClient, RepoInfo, RepoRequest
from gh_repo_create.scaffold import create_repo_dir, write_readme

logger = logging.getLogger(__name__)


class RunState(enum.Enum):
    START = "start"
    DIR_CREATED = "dir_created"
    README_WRITTEN = "readme_written"
    VCS_INITIALIZED = "vcs_initialized"
    COMMITTED = "committed"
    REMOTE_CREATED = "remote_created"
    REMOTE_CONFIGURED = "remote_configured"
    BRANCH_RENAMED = "branch_renamed"
    PUSHED = "pushed"
    DONE = "done"
    FAILED = "failed"


class StepError(RuntimeError):
    def __init__(self, step: str, reached: RunState) -> None:
        super().__init__(step)
        self.step = step
        self.reached = reached


class RepoCreator(Protocol):
    def create_repo(self, request: RepoRequest, org: str | None = None) -> RepoInfo: ...


@dataclass(frozen=True)
class Options:
    repo_name: str
    private: bool = False
    org: str | None = None


@dataclass(frozen=True)
class Step:
    name: str
    target: RunState
    action: Callable[[], None]


@dataclass
class RunResult:
    state: RunState
    repo_dir: Path
    remote_url: str | None = None
    completed: list[str] = field(default_factory=list)


def _noop(_msg: str) -> None:
    pass


def run_steps(steps: Iterable[Step], result: RunResult) -> RunResult:
    """
    Run `steps` left to right, advancing `result.state` after each success.
    """
    for step in steps:
        logger.debug("step %r (%s -> %s)", step.name, result.state.value, step.target.value)
        try:
            step.action()
        except Exception as e:
            reached = result.state
            result.state = RunState.FAILED
            raise StepError(step.name, reached) from e
        result.state = step.target
        result.completed.append(step.name)
    result.state = RunState.DONE
    return result


def build_steps(
    options: Options,
    result: RunResult,
    *,
    git: GitRunner,
    github: RepoCreator,
    echo: Callable[[str], None] = _noop,
) -> list[Step]:
    repo_dir = result.repo_dir

    def make_dir() -> None:
        create_repo_dir(repo_dir)

    def readme() -> None:
        write_readme(repo_dir, options.repo_name)
        echo(f"Created directory and README for {options.repo_name}")

    def init() -> None:
        git.init(repo_dir)

    def commit() -> None:
        git.add_all(repo_dir)
        git.commit(repo_dir)
        echo("Initialized git repo and created initial commit")

    def create_remote() -> None:
        echo("Creating GitHub repository via API...")
        info = github.create_repo(RepoRequest(name=options.repo_name, private=options.private), org=options.org)
        result.remote_url = info.ssh_url
        echo(f"Remote created: {info.ssh_url}")

    def add_remote() -> None:
        git.add_remote(repo_dir, result.remote_url or "")

    def rename_branch() -> None:
        git.rename_branch(repo_dir)

    def push() -> None:
        git.push_upstream(repo_dir)
        echo("Pushed initial commit to GitHub over SSH")

    return [
        Step(f"creating directory {repo_dir}", RunState.DIR_CREATED, make_dir),
        Step("writing README.md", RunState.README_WRITTEN, readme),
        Step("initializing git repository", RunState.VCS_INITIALIZED, init),
        Step("creating initial commit", RunState.COMMITTED, commit),
        Step("creating GitHub repository", RunState.REMOTE_CREATED, create_remote),
        Step("adding git remote origin", RunState.REMOTE_CONFIGURED, add_remote),
        Step("renaming branch to main", RunState.BRANCH_RENAMED, rename_branch),
        Step("pushing to origin/main", RunState.PUSHED, push),
    ]


def create_and_push(
    options: Options,
    settings: Settings | None = None,
    *,
    base_dir: str | Path = ".",
    git: GitRunner | None = None,
    github: RepoCreator | None = None,
    echo: Callable[[str], None] = _noop,
) -> RunResult:
    """
    Scaffold `<base_dir>/<repo_name>`, commit it, create the GitHub repo and push.

    Either `settings` or an explicit `github` client must be given.
    """
    if github is None:
        if settings is None:
            raise ValueError("settings are required when no GitHub client is given")
        github = GitHubClient(settings.token, settings.api_base, user_agent=settings.user_agent)

    result = RunResult(state=RunState.START, repo_dir=Path(base_dir) / options.repo_name)
    steps = build_steps(options, result, git=git or GitRunner(), github=github, echo=echo)
    return run_steps(steps, result)
