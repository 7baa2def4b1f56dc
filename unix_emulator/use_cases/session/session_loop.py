"""
Session loop: the state machine driving one interpreter session.
"""

import logging
from typing import Callable, Optional

from unix_emulator.entities.command import CommandKind
from unix_emulator.entities.session_state import SessionMode, SessionState
from unix_emulator.entities.styled_line import StyledLine
from unix_emulator.exceptions import BaseAppError
from unix_emulator.ports.display_port import DisplayPort
from unix_emulator.ports.filesystem_port import FileSystemPort
from unix_emulator.use_cases.commands.registry import CommandRegistry
from unix_emulator.use_cases.commands.tokenizer import tokenize

WELCOME_BANNER = "Welcome to the Unix Emulator"
ESCAPE = "\x1b"
BODY_PROMPT = "... "


class SessionLoop:
    """
    Reads lines, dispatches them and keeps the display in sync with history.

    The loop can be driven by events (``start``/``submit``/``interrupt``, as the
    Qt window does) or by a blocking reader through ``run``.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        file_system: FileSystemPort,
        display: Optional[DisplayPort] = None,
        max_visible_lines: int = 20,
        banner: Optional[str] = WELCOME_BANNER,
        logger: Optional[logging.Logger] = None,
    ):
        self._registry = registry
        self._fs = file_system
        self._display = display
        self._max_visible_lines = max_visible_lines
        self._banner = banner
        self._logger = logger or logging.getLogger(__name__)
        self._state: Optional[SessionState] = None

    @property
    def state(self) -> SessionState:
        if self._state is None:
            raise RuntimeError("Session has not been started")
        return self._state

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def terminated(self) -> bool:
        return self._state is not None and self._state.is_terminated

    @property
    def prompt(self) -> str:
        state = self.state
        if state.mode is SessionMode.AWAITING_FILE_BODY:
            return BODY_PROMPT
        return state.prompt

    def attach_display(self, display: DisplayPort) -> None:
        self._display = display

    def start(self) -> SessionState:
        """Create the session state in the filesystem's starting directory."""
        if self._state is not None:
            return self._state
        cwd = self._fs.get_current_directory()
        self._state = SessionState(current_directory=cwd)
        self._logger.info(f"Session started in {cwd}")
        if self._banner:
            self._state.append([StyledLine.output(self._banner)])
        if self._display is not None:
            self._display.show(list(self._state.history))
            self._display.set_prompt(self.prompt)
        return self._state

    def submit(self, line: str) -> list[StyledLine]:
        """
        Process one input line.

        Args:
            line: The line as typed, without the trailing newline

        Returns:
            The lines appended to history by this input
        """
        state = self.state
        if state.is_terminated:
            self._logger.debug("Ignoring input after termination")
            return []

        history_before = len(state.history)
        view_before = state.view_start

        if state.mode is SessionMode.AWAITING_FILE_BODY:
            self._accept_body_line(state, line)
        else:
            self._dispatch_line(state, line)

        added = state.history[history_before:]
        self._render(state, history_before, view_before)

        if not state.running:
            self._terminate(state)
        return added

    def interrupt(self) -> None:
        """Terminate immediately, dropping any unfinished file body."""
        if self._state is None or self._state.is_terminated:
            return
        if self._state.pending_file is not None:
            self._logger.info(
                f"Discarding unfinished body for {self._state.pending_file.path}"
            )
        self._logger.info("Session interrupted")
        self._terminate(self._state)

    def run(self, read_line: Callable[[], str]) -> int:
        """
        Blocking loop: read, check for interrupt, process, until terminated.

        Args:
            read_line: Returns the next input line; may raise KeyboardInterrupt
                or EOFError, both treated as an interrupt

        Returns:
            Process exit code
        """
        self.start()
        while not self.terminated:
            try:
                line = read_line()
            except (KeyboardInterrupt, EOFError):
                self.interrupt()
                break
            if ESCAPE in line:
                self.interrupt()
                break
            self.submit(line)
        return 0

    def scrollback(self) -> list[StyledLine]:
        return list(self.state.history)

    def visible_lines(self) -> list[StyledLine]:
        return self.state.visible_lines(self._max_visible_lines)

    # Internals
    def _dispatch_line(self, state: SessionState, line: str) -> None:
        parsed = tokenize(line)
        if parsed.is_empty:
            return
        state.mode = SessionMode.DISPATCHING
        state.append([StyledLine.prompt(f"{state.prompt}{line.strip()}")])
        state.append(self._registry.dispatch(parsed, state))
        if state.mode is SessionMode.DISPATCHING:
            state.mode = SessionMode.AWAITING_INPUT

    def _accept_body_line(self, state: SessionState, line: str) -> None:
        state.append([StyledLine.prompt(f"{BODY_PROMPT}{line}")])
        if tokenize(line).command.kind is CommandKind.EXIT:
            if state.pending_file is not None:
                self._logger.info(f"Discarding unfinished body for {state.pending_file.path}")
            state.running = False
            return
        if line.rstrip() != self._registry.body_terminator:
            if state.pending_file is not None:
                state.pending_file.lines.append(line)
            return

        pending = state.finish_file_body()
        if pending is None:
            return
        try:
            self._fs.create_file(pending.path, pending.content)
            state.append([StyledLine.output(f"File '{pending.display_name}' created.")])
        except BaseAppError as e:
            self._logger.warning(f"touch failed: {e}")
            state.append([StyledLine.error(f"touch: {e}")])
        except Exception as e:
            self._logger.exception("Unexpected error while writing file body")
            state.append([StyledLine.error(f"touch: {e}")])

    def _render(self, state: SessionState, history_before: int, view_before: int) -> None:
        if self._display is None:
            return
        start = history_before
        if state.view_start != view_before:
            self._display.reset_view()
            start = max(history_before, state.view_start)
        new_lines = state.history[start:]
        if new_lines:
            self._display.show(new_lines)
        self._display.set_prompt(self.prompt)

    def _terminate(self, state: SessionState) -> None:
        state.terminate()
        self._logger.info("Session terminated")
        if self._display is not None:
            self._display.close()
