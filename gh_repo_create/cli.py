"""
cli.py

Responsibility: CLI entrypoint for gh-repo-create.

High-level flow (single command):
1) Resolve the API token from the environment (fail before any side effect)
2) Create `./<repo_name>/` with a seed README
3) git init, add, commit
4) Create the GitHub repo via the REST API
5) git remote add, branch -M main, push -u origin main

This module should orchestrate behavior but keep concerns isolated:
- Settings: `config.py`
- Scaffolding: `scaffold.py`
- git subprocesses: `git.py`
- GitHub API: `github_client.py`
- Step ordering / failure state: `pipeline.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from pathlib import Path

from gh_repo_create import __version__
from gh_repo_create.config import ConfigError, Settings
from gh_repo_create.git import GitRunner
from gh_repo_create.pipeline import Options, StepError, create_and_push

logger = logging.getLogger("gh_repo_create")


def _repo_name(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("repository name must not be empty")
    return value


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def format_error(err: BaseException) -> str:
    """
    Render an exception and its `__cause__` chain, outermost first.
    """
    lines = [f"Error: {err}"]
    cause = err.__cause__
    if cause is not None:
        lines.append("")
        lines.append("Caused by:")
        i = 0
        while cause is not None:
            lines.append(f"    {i}: {cause}")
            cause = cause.__cause__
            i += 1
    return "\n".join(lines)


def _echo(msg: str) -> None:
    print(msg, flush=True)


def run(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> int:
    settings = Settings.from_env(environ)
    options = Options(repo_name=args.repo_name, private=bool(args.private), org=args.org)
    result = create_and_push(
        options,
        settings,
        base_dir=Path.cwd(),
        git=GitRunner(),
        echo=_echo,
    )

    _echo("\n✔ Repository setup complete!")
    _echo(f"Local directory: ./{options.repo_name}")
    _echo(f"Remote URL: {result.remote_url}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gh-repo-create",
        description="Create a GitHub repo via the API, then push a local repo over SSH.",
    )
    p.add_argument(
        "repo_name",
        type=_repo_name,
        help="Name of the repository to create (also used for the local folder)",
    )
    p.add_argument("--private", action="store_true", help="Create the repo as private (default: public)")
    p.add_argument("--org", default=None, help="GitHub organization to create the repo under")
    p.add_argument("-v", "--verbose", action="store_true", help="Log git commands and API calls to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(args.verbose))

    try:
        return run(args, environ)
    except (ConfigError, StepError) as e:
        print(format_error(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
