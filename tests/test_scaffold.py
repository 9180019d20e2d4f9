import pytest

from gh_repo_create.scaffold import ScaffoldError, create_repo_dir, render_readme, write_readme


@pytest.mark.parametrize("name", ["demo", "my-repo", "a.b_c", "Ünïcode"])
def test_readme_content_is_heading_plus_newline(tmp_path, name: str) -> None:
    repo_dir = create_repo_dir(tmp_path / name)
    readme = write_readme(repo_dir, name)
    assert readme.read_bytes() == f"# {name}\n".encode("utf-8")


def test_render_readme_does_not_escape() -> None:
    assert render_readme("<x>&y") == "# <x>&y\n"


def test_create_repo_dir_is_idempotent(tmp_path) -> None:
    create_repo_dir(tmp_path / "demo")
    (tmp_path / "demo" / "keep.txt").write_text("x")
    create_repo_dir(tmp_path / "demo")
    assert (tmp_path / "demo" / "keep.txt").exists()


def test_create_repo_dir_over_a_file_fails(tmp_path) -> None:
    (tmp_path / "demo").write_text("not a dir")
    with pytest.raises(ScaffoldError) as exc:
        create_repo_dir(tmp_path / "demo")
    assert isinstance(exc.value.__cause__, OSError)


def test_write_readme_into_missing_dir_fails(tmp_path) -> None:
    with pytest.raises(ScaffoldError, match="README.md"):
        write_readme(tmp_path / "nope", "demo")
