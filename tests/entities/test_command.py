"""
Tests for the command entities.
"""

from unix_emulator.entities.command import Command, CommandKind, ParsedLine


class TestCommand:
    """Test cases for Command."""

    def test_from_name_known(self):
        for name in ["touch", "mkdir", "rm", "rmdir", "cd", "pwd", "ls", "cat", "echo", "clear", "exit"]:
            command = Command.from_name(name)
            assert command.kind.value == name
            assert command.name == name

    def test_from_name_unknown(self):
        command = Command.from_name("vim")

        assert command.kind is CommandKind.UNKNOWN
        assert command.name == "vim"

    def test_from_name_empty(self):
        assert Command.from_name("").kind is CommandKind.EMPTY

    def test_only_touch_takes_free_text(self):
        assert Command.from_name("touch").takes_free_text
        assert not Command.from_name("echo").takes_free_text

    def test_parsed_line_defaults_to_no_arguments(self):
        parsed = ParsedLine(Command.from_name("ls"))

        assert parsed.arguments == ()
        assert not parsed.is_empty
