"""Branch protection patterns and classification."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

logger = logging.getLogger(__name__)

CONFIG_SECTION = "broom"
CONFIG_OPTION = "protectedbranches"


class ConfigSource(Protocol):
    def get_config_value(self, section: str, option: str) -> Optional[str]: ...


@dataclass(frozen=True)
class Branch:
    """A merge candidate and whether a protection pattern matched it."""

    name: str
    protected: bool = False


def compile_patterns(value: Optional[str]) -> list[re.Pattern[str]]:
    """Compile a comma-separated list of regular expressions.

    Tokens are compiled exactly as written, surrounding spaces included, and
    only tokens that are not valid expressions are dropped. A blank token is
    an empty expression and protects every branch.
    """
    if value is None:
        return []

    patterns = []
    for token in value.split(","):
        try:
            patterns.append(re.compile(token))
        except re.error as err:
            logger.debug("Ignoring invalid protection pattern %r: %s", token, err)
    return patterns


def load_protection_patterns(source: ConfigSource) -> list[re.Pattern[str]]:
    """Load protection patterns from `broom.protectedBranches` in the repository config."""
    return compile_patterns(source.get_config_value(CONFIG_SECTION, CONFIG_OPTION))


def is_protected(name: str, patterns: Iterable[re.Pattern[str]]) -> bool:
    return any(pattern.search(name) for pattern in patterns)


def classify(names: Iterable[str], patterns: Iterable[re.Pattern[str]]) -> list[Branch]:
    """Tag every candidate as protected or not, keeping the input order."""
    patterns = list(patterns)
    return [Branch(name=name, protected=is_protected(name, patterns)) for name in names]
