"""
scaffold.py

Responsibility: Create the local repository folder and its seed README.

Rules:
- Creating the folder is idempotent; an existing folder is reused.
- The README is rendered from a Jinja2 template and always ends with exactly one newline.

This module intentionally does NOT know about git, GitHub, or CLI parsing.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, StrictUndefined

README_NAME = "README.md"
README_TEMPLATE = "# {{ repo_name }}\n"

_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


class ScaffoldError(RuntimeError):
    pass


def render_readme(repo_name: str) -> str:
    return _env.from_string(README_TEMPLATE).render(repo_name=repo_name)


def create_repo_dir(path: str | Path) -> Path:
    """
    Create `path` (and any parents). Succeeds if it already exists as a directory.
    """
    repo_dir = Path(path)
    try:
        repo_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldError(f"creating directory {repo_dir}") from e
    return repo_dir


def write_readme(repo_dir: str | Path, repo_name: str) -> Path:
    """
    Write `README.md` into `repo_dir`, replacing any existing one.
    """
    readme = Path(repo_dir) / README_NAME
    try:
        readme.write_text(render_readme(repo_name), encoding="utf-8", newline="\n")
    except OSError as e:
        raise ScaffoldError(f"writing {README_NAME}") from e
    return readme
