"""
Command registry: maps every command kind to its handler.
"""

import logging
import os
from typing import Callable, Optional, Sequence

from unix_emulator.entities.command import CommandKind, ParsedLine
from unix_emulator.entities.session_state import SessionState
from unix_emulator.entities.styled_line import StyledLine
from unix_emulator.exceptions import BaseAppError, CommandUsageError
from unix_emulator.ports.filesystem_port import FileSystemPort

Handler = Callable[[Sequence[str], SessionState], list[StyledLine]]

DEFAULT_BODY_TERMINATOR = "EOF"


class CommandRegistry:
    """
    Fixed mapping from command kind to handler.

    Handlers mutate the session state they are given and return the lines to
    append to history; they never talk to a display.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        body_terminator: str = DEFAULT_BODY_TERMINATOR,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the registry.

        Args:
            file_system: Port used for every filesystem primitive
            body_terminator: Line that ends interactive file-body entry
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._body_terminator = body_terminator
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[CommandKind, Handler] = {
            CommandKind.TOUCH: self._touch,
            CommandKind.MKDIR: self._mkdir,
            CommandKind.RM: self._rm,
            CommandKind.RMDIR: self._rmdir,
            CommandKind.CD: self._cd,
            CommandKind.PWD: self._pwd,
            CommandKind.LS: self._ls,
            CommandKind.CAT: self._cat,
            CommandKind.ECHO: self._echo,
            CommandKind.CLEAR: self._clear,
            CommandKind.EXIT: self._exit,
            CommandKind.EMPTY: self._noop,
        }
        missing = set(CommandKind) - set(self._handlers) - {CommandKind.UNKNOWN}
        if missing:
            raise RuntimeError(f"Commands without handler: {sorted(k.name for k in missing)}")

    @property
    def body_terminator(self) -> str:
        return self._body_terminator

    def dispatch(self, parsed: ParsedLine, state: SessionState) -> list[StyledLine]:
        """
        Run the handler for a parsed line.

        Every failure is converted into a single error line; nothing escapes.

        Args:
            parsed: Tokenized input line
            state: Session state the handler acts on

        Returns:
            Styled lines to append to history
        """
        command = parsed.command
        if command.kind is CommandKind.UNKNOWN:
            self._logger.debug(f"Unknown command: {command.name}")
            return [StyledLine.error(f"unknown command: {command.name}")]

        handler = self._handlers[command.kind]
        self._logger.debug(f"Dispatching {command.name} {list(parsed.arguments)}")
        try:
            return handler(parsed.arguments, state)
        except BaseAppError as e:
            self._logger.warning(f"{command.name} failed: {e}")
            if isinstance(e, CommandUsageError):
                return [StyledLine.error(str(e))]
            return [StyledLine.error(f"{command.name}: {e}")]
        except Exception as e:
            self._logger.exception(f"Unexpected error while running {command.name}")
            return [StyledLine.error(f"{command.name}: {e}")]

    # Helpers
    @staticmethod
    def resolve(state: SessionState, name: str) -> str:
        """Resolve a typed name against the session's current directory."""
        if name == "~" or name.startswith("~/"):
            name = state.home_directory + name[1:]
        return os.path.normpath(os.path.join(state.current_directory, name))

    @staticmethod
    def _operand(command: str, args: Sequence[str]) -> str:
        if not args or not args[0]:
            raise CommandUsageError(f"{command}: missing operand")
        return args[0]

    # Handlers
    def _touch(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        name = self._operand("touch", args)
        path = self.resolve(state, name)
        if len(args) == 1:
            # Fail before body entry if the file could never be written.
            self._fs.change_directory(os.path.dirname(path))
            state.begin_file_body(path, name)
            return [
                StyledLine.output(
                    f"Enter content for '{name}', finish with '{self._body_terminator}' on its own line."
                )
            ]
        self._fs.create_file(path, " ".join(args[1:]))
        return [StyledLine.output(f"File '{name}' created.")]

    def _mkdir(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        name = self._operand("mkdir", args)
        self._fs.create_directory(self.resolve(state, name))
        return [StyledLine.output(f"Directory '{name}' created.")]

    def _rm(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        name = self._operand("rm", args)
        self._fs.remove_file(self.resolve(state, name))
        return [StyledLine.output(f"File '{name}' deleted.")]

    def _rmdir(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        name = self._operand("rmdir", args)
        self._fs.remove_directory(self.resolve(state, name))
        return [StyledLine.output(f"Directory '{name}' removed.")]

    def _cd(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        name = self._operand("cd", args)
        state.current_directory = self._fs.change_directory(self.resolve(state, name))
        return []

    def _pwd(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        return [StyledLine.output(state.current_directory)]

    def _ls(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        path = self.resolve(state, args[0]) if args else state.current_directory
        return [StyledLine.output(name) for name in self._fs.list_directory(path)]

    def _cat(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        name = self._operand("cat", args)
        content = self._fs.read_file(self.resolve(state, name))
        return [StyledLine.output(line) for line in content.splitlines()]

    def _echo(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        return [StyledLine.echo(" ".join(args))]

    def _clear(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        state.reset_view()
        return []

    def _exit(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        state.running = False
        return []

    def _noop(self, args: Sequence[str], state: SessionState) -> list[StyledLine]:
        return []
