"""Interactive choice of the branches to delete.

The operator first picks a mode: delete all branches, a selection, or none.
For a selection every branch is confirmed one at a time. Anything that is not
a recognized answer, including an empty line or end of input, means "none" or
"no": an unrecognized keystroke never deletes a branch.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from broom.protection import Branch


class Prompter(Protocol):
    def ask(self, key: str, **args: object) -> str: ...

    def response(self, key: str) -> str: ...

    def say(self, key: str, **args: object) -> None: ...

    def blank(self) -> None: ...


class State(Enum):
    """Decision engine state."""

    AWAIT_MODE = "await-mode"
    AWAIT_PER_BRANCH = "await-per-branch"
    DONE = "done"


class Mode(Enum):
    """Deletion mode chosen by the operator."""

    ALL = "all"
    SELECTED = "selected"
    NONE = "none"


@dataclass
class Decision:
    """Outcome of the decision engine."""

    mode: Mode
    branches: list[Branch] = field(default_factory=list)


def read_choice(answer: str) -> str:
    """Reduce an answer to a single lowercase character, empty if it is anything else.

    Whitespace around the character is ignored, so " a" picks the same mode as "a".
    """
    choice = answer.strip().lower()
    return choice if len(choice) == 1 else ""


def eligible_branches(candidates: list[Branch], include_protected: bool = False) -> list[Branch]:
    """Filter out protected branches unless they were explicitly included."""
    return [branch for branch in candidates if include_protected or not branch.protected]


class DecisionEngine:
    """Resolve which candidates to delete by asking the operator."""

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter
        self.state = State.AWAIT_MODE

    def resolve(self, candidates: list[Branch], include_protected: bool = False) -> Decision:
        eligible = eligible_branches(candidates, include_protected)
        mode = self._ask_mode()

        if mode is Mode.ALL:
            decision = Decision(mode, eligible)
        elif mode is Mode.SELECTED:
            self.state = State.AWAIT_PER_BRANCH
            self.prompter.blank()
            decision = Decision(mode, [branch for branch in eligible if self._confirm(branch)])
        else:
            decision = Decision(Mode.NONE)

        self.state = State.DONE
        return decision

    def _ask_mode(self) -> Mode:
        choice = read_choice(self.prompter.ask("delete-selection"))
        if not choice:
            return Mode.NONE
        if choice == self.prompter.response("answer-all"):
            return Mode.ALL
        if choice == self.prompter.response("answer-selected"):
            return Mode.SELECTED
        return Mode.NONE

    def _confirm(self, branch: Branch) -> bool:
        key = "delete-protected-branch-yes-no" if branch.protected else "delete-branch-yes-no"
        choice = read_choice(self.prompter.ask(key, branch=branch.name))
        if choice and choice == self.prompter.response("answer-yes"):
            return True
        self.prompter.say("branch-has-not-been-deleted", branch=branch.name)
        return False
