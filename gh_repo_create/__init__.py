"""
gh_repo_create package

This package implements gh-repo-create as a CLI-first utility.

Key responsibilities are split across modules:
- `config.py`: resolve settings (API token, API base) from the environment
- `scaffold.py`: create the local folder and render its seed README
- `git.py`: run local git commands as subprocesses
- `github_client.py`: isolated GitHub REST API interactions (repo creation)
- `pipeline.py`: the ordered, fail-fast sequence of steps for one run
- `cli.py`: CLI entrypoint and orchestration (env -> scaffold -> git -> API -> push)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
