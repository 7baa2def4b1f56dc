"""
Tokenizer turning a raw input line into a ParsedLine.
"""

from unix_emulator.entities.command import Command, ParsedLine

QUOTE = '"'


def _split_free_text(remainder: str) -> tuple[str, ...]:
    """
    Split arguments where a double-quoted payload is kept as one argument.

    The text strictly between the first and the last quote is taken verbatim;
    tokens before the first quote are split on whitespace and anything after
    the last quote is ignored. With fewer than two quotes this degrades to a
    plain whitespace split.
    """
    first = remainder.find(QUOTE)
    last = remainder.rfind(QUOTE)
    if first == -1 or first == last:
        return tuple(remainder.split())
    head = remainder[:first].split()
    return (*head, remainder[first + 1 : last])


def tokenize(line: str) -> ParsedLine:
    """
    Tokenize one input line. Never raises.

    Args:
        line: The raw line as typed

    Returns:
        ParsedLine with the resolved command and its arguments
    """
    stripped = (line or "").strip()
    if not stripped:
        return ParsedLine(Command.from_name(""))

    parts = stripped.split(maxsplit=1)
    command = Command.from_name(parts[0])
    remainder = parts[1] if len(parts) > 1 else ""

    if command.takes_free_text:
        arguments = _split_free_text(remainder)
    else:
        arguments = tuple(remainder.split())
    return ParsedLine(command, arguments)
