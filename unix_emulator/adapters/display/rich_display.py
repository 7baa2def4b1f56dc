"""
Terminal display adapter rendering styled lines with rich.
"""

import logging
from typing import Optional, Sequence

from rich.console import Console
from rich.text import Text
from typing_extensions import override

from unix_emulator.entities.styled_line import LineCategory, StyledLine
from unix_emulator.ports.display_port import DisplayPort

CATEGORY_STYLES: dict[LineCategory, str] = {
    LineCategory.PROMPT: "cyan",
    LineCategory.OUTPUT: "default",
    LineCategory.ERROR: "bold red",
    LineCategory.ECHO: "yellow",
}


class RichConsoleDisplay(DisplayPort):
    """Display port printing to a rich Console; also the blocking line reader."""

    def __init__(
        self,
        console: Optional[Console] = None,
        echo_prompts: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the display.

        Args:
            console: Console to print to. Defaults to stdout.
            echo_prompts: Print prompt lines too. A terminal already shows what
                the user typed, so they are skipped by default.
            logger: Logger instance to use for logging
        """
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._echo_prompts = echo_prompts
        self._logger = logger or logging.getLogger(__name__)
        self._prompt = "> "
        self._closed = False

    @property
    def console(self) -> Console:
        return self._console

    @property
    def closed(self) -> bool:
        return self._closed

    def to_text(self, line: StyledLine) -> Text:
        return Text(line.text, style=CATEGORY_STYLES.get(line.category, "default"))

    @override
    def show(self, lines: Sequence[StyledLine]) -> None:
        for line in lines:
            if line.category is LineCategory.PROMPT and not self._echo_prompts:
                continue
            self._console.print(self.to_text(line))

    @override
    def set_prompt(self, prompt: str) -> None:
        self._prompt = prompt

    @override
    def reset_view(self) -> None:
        self._console.clear()

    @override
    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._logger.debug("Console display closed")
        self._console.print(Text("Exiting Unix Emulator. Goodbye!", style="green"))

    def read_line(self) -> str:
        """Block for the next line; raises EOFError/KeyboardInterrupt like input()."""
        return self._console.input(Text(self._prompt, style="cyan"))
