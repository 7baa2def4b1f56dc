"""
Tests for the RichConsoleDisplay.
"""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from unix_emulator.adapters.display.rich_display import RichConsoleDisplay
from unix_emulator.entities.styled_line import StyledLine


@pytest.fixture
def console_output():
    return io.StringIO()


@pytest.fixture
def console(console_output):
    return Console(file=console_output, force_terminal=False, width=80)


class TestRichConsoleDisplay:
    """Test cases for the RichConsoleDisplay."""

    def test_show_skips_prompt_lines(self, console, console_output, mock_logger):
        display = RichConsoleDisplay(console, logger=mock_logger)

        display.show(
            [
                StyledLine.prompt("> /tmp ls"),
                StyledLine.output("a.txt"),
                StyledLine.error("unknown command: x"),
            ]
        )

        assert console_output.getvalue() == "a.txt\nunknown command: x\n"

    def test_show_with_prompts(self, console, console_output, mock_logger):
        display = RichConsoleDisplay(console, echo_prompts=True, logger=mock_logger)

        display.show([StyledLine.prompt("> /tmp ls")])

        assert console_output.getvalue() == "> /tmp ls\n"

    def test_error_style(self, console, mock_logger):
        display = RichConsoleDisplay(console, logger=mock_logger)

        text = display.to_text(StyledLine.error("boom"))

        assert str(text.style) == "bold red"

    def test_close_once(self, console, console_output, mock_logger):
        display = RichConsoleDisplay(console, logger=mock_logger)

        display.close()
        display.close()

        assert display.closed
        assert console_output.getvalue().count("Goodbye!") == 1

    def test_read_line_uses_prompt(self, console, console_output, mock_logger):
        display = RichConsoleDisplay(console, logger=mock_logger)
        display.set_prompt("> /tmp ")

        with patch("builtins.input", return_value="ls"):
            assert display.read_line() == "ls"
        assert console_output.getvalue().startswith("> /tmp")
