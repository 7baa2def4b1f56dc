"""
Display port interface: where the session sends what it wants shown.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from unix_emulator.entities.styled_line import StyledLine


class DisplayPort(ABC):
    """Port interface for rendering styled lines; owns colors and cursor concerns."""

    @abstractmethod
    def show(self, lines: Sequence[StyledLine]) -> None:
        """Render lines after those already shown."""
        pass

    @abstractmethod
    def set_prompt(self, prompt: str) -> None:
        """Update the prompt shown in front of the input."""
        pass

    @abstractmethod
    def reset_view(self) -> None:
        """Discard the rendered view; history itself is kept by the session."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Session ended; release the display."""
        pass
