"""Errors that abort a broom run.

Each error carries a message key and its arguments instead of text, so the
command line can render it in the operator's language.
"""

from typing import Any


class BroomError(Exception):
    """Base class for fatal broom errors."""

    key = "broom-error"

    def __init__(self, **details: Any) -> None:
        super().__init__(f"{self.key} {details}" if details else self.key)
        self.details = details


class ToolUnavailableError(BroomError):
    """Git is missing or cannot be run."""

    key = "git-unavailable"


class NotARepositoryError(BroomError):
    """The target location is not a Git work tree."""

    key = "not-a-repository"


class NoValidBranchError(BroomError):
    """The working branch could not be resolved."""

    key = "no-valid-branch-found"
