"""Message catalogs.

Operator facing text lives in Fluent files under `broom/locales`, one file per
locale. Code only ever refers to message keys.
"""

import logging
from importlib.resources import files
from typing import Any, Optional

import babel
from fluent.runtime import FluentBundle, FluentResource

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

def available_locales() -> list[str]:
    """List locales that ship a catalog."""
    locales_dir = files("broom").joinpath("locales")
    return sorted(entry.name[: -len(".ftl")] for entry in locales_dir.iterdir() if entry.name.endswith(".ftl"))


def requested_locale() -> Optional[str]:
    """Get the messages locale of the environment as a tag, e.g. `fr_FR.UTF-8` -> `fr-FR`."""
    identifier = babel.default_locale("LC_MESSAGES")
    return identifier.replace("_", "-") if identifier else None


def negotiate_locale(requested: Optional[str], available: list[str]) -> str:
    """Pick the best available locale for `requested`.

    An exact match wins, then the usual locale of the same language, then the default.
    """
    if not requested:
        return DEFAULT_LOCALE

    language = requested.split("-", 1)[0]
    match = babel.negotiate_locale([requested, language], available, sep="-")
    if match is None:
        return DEFAULT_LOCALE
    # babel answers with the casing of the request
    by_lower = {locale.lower(): locale for locale in available}
    return by_lower.get(match.lower(), DEFAULT_LOCALE)


class Messages:
    """Render message keys in the negotiated locale."""

    def __init__(self, locale: Optional[str] = None) -> None:
        self.locale = negotiate_locale(locale or requested_locale(), available_locales())
        text = files("broom").joinpath("locales").joinpath(f"{self.locale}.ftl").read_text(encoding="utf-8")
        self.bundle = FluentBundle([self.locale], use_isolating=False)
        self.bundle.add_resource(FluentResource(text))
        logger.debug("Using %s messages", self.locale)

    def render(self, key: str, **args: Any) -> str:
        """Format message `key`. Unknown keys render as the key itself."""
        if not self.bundle.has_message(key):
            return key
        message = self.bundle.get_message(key)
        if message.value is None:
            return key
        text, errors = self.bundle.format_pattern(message.value, args)
        for error in errors:
            logger.debug("Formatting %s: %s", key, error)
        return text
