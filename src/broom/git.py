"""Git repository operations."""

import logging
from pathlib import Path
from typing import Optional

from git import Git, GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

from broom.errors import NoValidBranchError, NotARepositoryError, ToolUnavailableError

logger = logging.getLogger(__name__)

# Markers `git branch` puts in front of branches checked out in this or another worktree
CHECKED_OUT_MARKERS = ("*", "+")


def check_git() -> None:
    """Make sure the git executable can be run.

    Raises:
        ToolUnavailableError: If git is missing or does not answer a version query
    """
    try:
        version = Git().version()
    except (GitCommandNotFound, GitCommandError, OSError) as err:
        raise ToolUnavailableError() from err
    logger.debug("Using %s", version)


def parse_merged_branches(output: str, working_branch: str) -> list[str]:
    """Extract merge candidates from `git branch --merged` output.

    The working branch and checked out branches are left out, so they can
    never be offered for deletion.
    """
    branches = []
    for line in output.splitlines():
        name = line.strip()
        if not name or name.startswith(CHECKED_OUT_MARKERS) or name == working_branch:
            continue
        branches.append(name)
    return branches


class GitRepo:
    """Git repository operations.

    Every git call runs against the repository root given at construction,
    the process working directory is never changed.
    """

    def __init__(self, path: Path) -> None:
        """Open the repository containing `path`.

        Raises:
            NotARepositoryError: If `path` is not inside a Git work tree
        """
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
            if self.repo.bare:
                raise NotARepositoryError(path=str(path))
            self.repo.git.status()
        except (GitCommandError, InvalidGitRepositoryError, NoSuchPathError, ValueError) as err:
            raise NotARepositoryError(path=str(path)) from err
        logger.debug("Opened repository at %s", self.repo.working_tree_dir)

    def get_current_branch_name(self) -> str:
        """Get the checked out branch name, empty if it cannot be resolved."""
        try:
            return self.repo.git.rev_parse("--abbrev-ref", "HEAD").strip()
        except GitCommandError as err:
            # A repository without any commit has no HEAD to resolve
            logger.debug("Cannot resolve HEAD: %s", err.stderr)
            return ""

    def get_merged_branches(self, working_branch: str) -> list[str]:
        """List local branches merged into `working_branch`, in git's order.

        Raises:
            NoValidBranchError: If git does not know `working_branch`
        """
        try:
            output = self.repo.git.branch("--no-color", "--merged", working_branch)
        except GitCommandError as err:
            logger.debug("Cannot list branches merged into %s: %s", working_branch, err.stderr)
            raise NoValidBranchError(branch=working_branch) from err
        return parse_merged_branches(output, working_branch)

    def get_config_value(self, section: str, option: str) -> Optional[str]:
        """Read a raw value from the repository config file, None if unset."""
        with self.repo.config_reader("repository") as reader:
            if not reader.has_option(section, option):
                return None
            return str(reader.get(section, option))

    def delete_branch(self, branch_name: str) -> bool:
        """Delete a local branch without forcing. Returns True if successful."""
        try:
            self.repo.git.branch("-d", branch_name)
            return True
        except GitCommandError as err:
            logger.debug("Failed to delete %s: %s", branch_name, err.stderr)
            return False
