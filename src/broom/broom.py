"""Sweep branches merged into the working branch."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from broom.decision import DecisionEngine, Mode, eligible_branches
from broom.errors import NoValidBranchError
from broom.git import GitRepo, check_git
from broom.protection import Branch, ConfigSource, classify, load_protection_patterns
from broom.ui import Interface

logger = logging.getLogger(__name__)


class Repository(ConfigSource, Protocol):
    def get_current_branch_name(self) -> str: ...

    def get_merged_branches(self, working_branch: str) -> list[str]: ...

    def delete_branch(self, branch_name: str) -> bool: ...


@dataclass(frozen=True)
class RunConfiguration:
    """Options of a single broom run."""

    repository_path: Optional[Path] = None
    explicit_branch: Optional[str] = None
    dry_run: bool = False
    include_protected: bool = False


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of one deletion attempt."""

    branch: Branch
    deleted: bool


def resolve_working_branch(repo: Repository, explicit_branch: Optional[str] = None) -> str:
    """Get the branch merges are checked against: the given one, else the checked out one.

    Raises:
        NoValidBranchError: If the branch resolves to an empty name
    """
    if explicit_branch is not None:
        working_branch = explicit_branch.strip()
    else:
        working_branch = repo.get_current_branch_name().strip()

    if not working_branch:
        raise NoValidBranchError()
    return working_branch


def delete_branches(repo: Repository, branches: list[Branch], ui: Interface) -> list[DeletionOutcome]:
    """Delete branches one by one, a failed deletion does not stop the others."""
    outcomes = []
    for branch in branches:
        deleted = repo.delete_branch(branch.name)
        if deleted:
            ui.say("branch-deleted", branch=branch.name)
        else:
            ui.say("branch-cannot-be-deleted", branch=branch.name)
        outcomes.append(DeletionOutcome(branch=branch, deleted=deleted))
    return outcomes


def report_protected(branches: list[Branch], working_branch: str, ui: Interface) -> None:
    ui.heading("found-merged-protected", count=len(branches), branch=working_branch)
    for branch in branches:
        ui.item(branch)
    ui.info("branches-wont-be-deleted", count=len(branches))


def run_broom(
    config: RunConfiguration,
    ui: Interface,
    open_repo: Callable[[Path], Repository] = GitRepo,
    check_tool: Callable[[], None] = check_git,
) -> list[DeletionOutcome]:
    """Find branches merged into the working branch and delete the ones the operator picks.

    Returns:
        One outcome per attempted deletion, empty when nothing was attempted.

    Raises:
        BroomError: If git is unavailable, the path is not a repository or no
            working branch can be resolved. Nothing is deleted in that case.
    """
    check_tool()
    repo = open_repo(config.repository_path or Path("."))

    working_branch = resolve_working_branch(repo, config.explicit_branch)
    logger.debug("Looking for branches merged into %s", working_branch)

    branches = classify(repo.get_merged_branches(working_branch), load_protection_patterns(repo))
    deletable = eligible_branches(branches, config.include_protected)
    protected = [branch for branch in branches if branch.protected]

    if protected and not config.include_protected:
        report_protected(protected, working_branch, ui)
        if deletable:
            ui.blank()

    if not deletable:
        ui.info("no-merged-branch", branch=working_branch)
        return []

    ui.heading("found-merged", count=len(deletable), branch=working_branch)
    for branch in deletable:
        ui.item(branch)

    if config.dry_run:
        ui.info("dry-run")
        return []

    decision = DecisionEngine(ui).resolve(deletable, config.include_protected)
    if decision.mode is Mode.NONE:
        ui.say("no-branch-deleted")
        return []

    if decision.mode is Mode.ALL:
        ui.blank()
    return delete_branches(repo, decision.branches, ui)
