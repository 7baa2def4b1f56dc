"""
Styled output line entity.
"""

from dataclasses import dataclass
from enum import Enum


class LineCategory(Enum):
    """Semantic category of an output line, used by displays for coloring."""

    PROMPT = "prompt"
    OUTPUT = "output"
    ERROR = "error"
    ECHO = "echo"


@dataclass(frozen=True)
class StyledLine:
    text: str
    category: LineCategory = LineCategory.OUTPUT

    @classmethod
    def prompt(cls, text: str) -> "StyledLine":
        return cls(text, LineCategory.PROMPT)

    @classmethod
    def output(cls, text: str) -> "StyledLine":
        return cls(text, LineCategory.OUTPUT)

    @classmethod
    def error(cls, text: str) -> "StyledLine":
        return cls(text, LineCategory.ERROR)

    @classmethod
    def echo(cls, text: str) -> "StyledLine":
        return cls(text, LineCategory.ECHO)
