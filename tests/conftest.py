"""Test configuration and fixtures."""

from pathlib import Path
from typing import Generator

import pytest
from git import Actor, Repo


@pytest.fixture(autouse=True)
def english_messages(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render every message in English whatever the host locale is."""
    for name in ("LANGUAGE", "LC_MESSAGES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")


@pytest.fixture
def test_env(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a repository on `main` with merged and unmerged branches.

    Branches:
        feature/merged: merged into main
        release/1.0: merged into main
        feature/unmerged: has a commit main does not have

    Returns:
        Path of the repository
    """
    local_path = tmp_path / "local"
    local_path.mkdir()
    local_repo = Repo.init(local_path)

    # Set up git config
    author = Actor("Test User", "test@example.com")
    with local_repo.config_writer() as writer:
        writer.set_value("user", "name", author.name)
        writer.set_value("user", "email", author.email)

    readme = local_path / "README.md"
    readme.write_text("# Test Repository")
    local_repo.index.add(["README.md"])
    local_repo.index.commit("Initial commit", author=author)

    # The default branch name depends on the git config of the host
    if local_repo.active_branch.name != "main":
        local_repo.git.branch("-m", "main")
    main_branch = local_repo.heads.main

    def create_branch(name: str, content: str, merge: bool = False) -> None:
        """Create a branch with one commit, optionally merged back into main."""
        main_branch.checkout()
        branch = local_repo.create_head(name)
        branch.checkout()

        test_file = local_path / f"{name}.txt"
        test_file.parent.mkdir(parents=True, exist_ok=True)
        test_file.write_text(content)
        local_repo.index.add([f"{name}.txt"])
        local_repo.index.commit(f"Add {name}", author=author)

        if merge:
            main_branch.checkout()
            local_repo.git.merge(name, "--no-ff")  # Use --no-ff to force a merge commit

    create_branch("feature/merged", "Merged branch content", merge=True)
    create_branch("release/1.0", "Release branch content", merge=True)
    create_branch("feature/unmerged", "Unmerged branch content")

    main_branch.checkout()

    yield local_path


@pytest.fixture
def test_repo(test_env: Path) -> Repo:
    """GitPython handle on the test repository, to set it up or inspect it."""
    return Repo(test_env)
