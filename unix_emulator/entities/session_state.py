"""
Session state entity owned by the session loop.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from unix_emulator.entities.styled_line import StyledLine


class SessionMode(Enum):
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    AWAITING_FILE_BODY = "awaiting_file_body"
    TERMINATED = "terminated"


@dataclass
class PendingFileBody:
    """File being written through interactive body entry."""

    path: str
    display_name: str
    lines: list[str] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "\n".join(self.lines)


@dataclass
class SessionState:
    """
    Mutable state of one interpreter session.

    History is append-only; ``view_start`` is the first history index that is
    part of the visible view, so clearing the view never drops entries.
    """

    current_directory: str
    home_directory: str = ""
    history: list[StyledLine] = field(default_factory=list)
    running: bool = True
    mode: SessionMode = SessionMode.AWAITING_INPUT
    view_start: int = 0
    pending_file: Optional[PendingFileBody] = None

    def __post_init__(self) -> None:
        if not self.home_directory:
            self.home_directory = self.current_directory

    @property
    def prompt(self) -> str:
        return f"> {self.current_directory} "

    @property
    def is_terminated(self) -> bool:
        return self.mode is SessionMode.TERMINATED

    def append(self, lines: Iterable[StyledLine]) -> list[StyledLine]:
        """Append lines to history and return them as a list."""
        added = list(lines)
        self.history.extend(added)
        return added

    def reset_view(self) -> None:
        self.view_start = len(self.history)

    def visible_lines(self, limit: Optional[int] = None) -> list[StyledLine]:
        view = self.history[self.view_start :]
        if limit is not None and limit > 0:
            return view[-limit:]
        return view

    def begin_file_body(self, path: str, display_name: str) -> None:
        self.pending_file = PendingFileBody(path=path, display_name=display_name)
        self.mode = SessionMode.AWAITING_FILE_BODY

    def finish_file_body(self) -> Optional[PendingFileBody]:
        pending = self.pending_file
        self.pending_file = None
        self.mode = SessionMode.AWAITING_INPUT
        return pending

    def terminate(self) -> None:
        """Stop the session, discarding any unfinished file body."""
        self.running = False
        self.pending_file = None
        self.mode = SessionMode.TERMINATED
