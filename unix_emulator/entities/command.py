"""
Command domain entities produced by the tokenizer.
"""

from dataclasses import dataclass, field
from enum import Enum


class CommandKind(Enum):
    """Closed set of commands the interpreter understands."""

    TOUCH = "touch"
    MKDIR = "mkdir"
    RM = "rm"
    RMDIR = "rmdir"
    CD = "cd"
    PWD = "pwd"
    LS = "ls"
    CAT = "cat"
    ECHO = "echo"
    CLEAR = "clear"
    EXIT = "exit"
    UNKNOWN = "unknown"
    EMPTY = ""


# Commands whose trailing text may be a double-quoted payload.
FREE_TEXT_COMMANDS = frozenset({CommandKind.TOUCH})


@dataclass(frozen=True)
class Command:
    """A command name resolved to its kind; unknown names keep the typed name."""

    kind: CommandKind
    name: str

    @classmethod
    def from_name(cls, name: str) -> "Command":
        if not name:
            return cls(CommandKind.EMPTY, "")
        for kind in CommandKind:
            if kind.value == name and kind not in (
                CommandKind.UNKNOWN,
                CommandKind.EMPTY,
            ):
                return cls(kind, name)
        return cls(CommandKind.UNKNOWN, name)

    @property
    def takes_free_text(self) -> bool:
        return self.kind in FREE_TEXT_COMMANDS


@dataclass(frozen=True)
class ParsedLine:
    """One tokenized input line."""

    command: Command
    arguments: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.command.kind is CommandKind.EMPTY
