"""Terminal interface: the only place broom writes to or reads from the operator."""

from typing import Any, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from broom.i18n import Messages
from broom.protection import Branch

ARG_STYLES = {"branch": "bold", "path": "bold"}


def style(value: Any, markup: str) -> str:
    """Wrap `value` in rich markup, escaping any markup it already contains."""
    return f"[{markup}]{escape(str(value))}[/{markup}]"


class Interface:
    """Render message keys to the console and read answers from stdin."""

    def __init__(
        self,
        messages: Messages,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        quiet: bool = False,
    ) -> None:
        self.messages = messages
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.stdin = stdin
        self.quiet = quiet

    def _render(self, key: str, args: dict[str, Any], styles: Optional[dict[str, str]] = None) -> str:
        styles = {**ARG_STYLES, **(styles or {})}
        styled = {name: style(value, styles[name]) if name in styles else value for name, value in args.items()}
        return self.messages.render(key, **styled)

    def say(self, key: str, **args: Any) -> None:
        """Print a result line, shown even in quiet mode."""
        self.console.print(self._render(key, args))

    def info(self, key: str, **args: Any) -> None:
        """Print an informational line, muted in quiet mode."""
        if not self.quiet:
            self.console.print(self._render(key, args))

    def heading(self, key: str, **args: Any) -> None:
        """Print a listing header, the working branch underlined."""
        if not self.quiet:
            self.console.print(self._render(key, args, {"branch": "bold underline"}))

    def item(self, branch: Branch) -> None:
        """Print one bullet of a branch listing, protected branches flagged in blue."""
        if self.quiet:
            return
        if branch.protected:
            self.console.print(self._render("protected-branch-item", {"branch": branch.name}, {"branch": "blue"}))
        else:
            self.console.print(self._render("branch-item", {"branch": branch.name}, {"branch": "green"}))

    def blank(self) -> None:
        if not self.quiet:
            self.console.print()

    def error(self, key: str, **args: Any) -> None:
        self.console.print(f"[red]{self._render(key, args)}[/red]")

    def ask(self, key: str, **args: Any) -> str:
        """Prompt with message `key` and return the raw answer, empty on end of input."""
        try:
            return self.console.input(self._render(key, args) + " ", stream=self.stdin)
        except EOFError:
            return ""

    def response(self, key: str) -> str:
        """Get the localized answer token for `key`, e.g. `answer-yes` -> `y`."""
        return self.messages.render(key).strip().lower()
