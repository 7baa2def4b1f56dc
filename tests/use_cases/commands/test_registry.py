"""
Tests for the CommandRegistry.
"""

from unittest.mock import MagicMock

from unix_emulator.entities.session_state import SessionMode
from unix_emulator.entities.styled_line import LineCategory, StyledLine
from unix_emulator.exceptions import FileSystemError, FsErrorKind
from unix_emulator.ports.filesystem_port import FileSystemPort
from unix_emulator.use_cases.commands.registry import CommandRegistry
from unix_emulator.use_cases.commands.tokenizer import tokenize


def run(registry, state, line):
    return registry.dispatch(tokenize(line), state)


def texts(lines):
    return [line.text for line in lines]


class TestCommandRegistry:
    """Test cases for the CommandRegistry."""

    def test_unknown_command(self, registry, state):
        lines = run(registry, state, "frob x")

        assert lines == [StyledLine.error("unknown command: frob")]
        assert state.current_directory == "/home/user"

    def test_empty_line_is_noop(self, registry, state):
        assert run(registry, state, "   ") == []

    def test_pwd(self, registry, state):
        assert run(registry, state, "pwd") == [StyledLine.output("/home/user")]

    def test_echo(self, registry, state):
        lines = run(registry, state, "echo hello   world")

        assert lines == [StyledLine.echo("hello world")]

    def test_bare_echo(self, registry, state):
        assert run(registry, state, "echo") == [StyledLine.echo("")]

    def test_touch_quoted_then_cat(self, registry, state, memory_fs):
        created = run(registry, state, 'touch f "a b c"')
        lines = run(registry, state, "cat f")

        assert texts(created) == ["File 'f' created."]
        assert memory_fs.read_file("/home/user/f") == "a b c"
        assert lines == [StyledLine.output("a b c")]

    def test_touch_unquoted_words_are_joined(self, registry, state, memory_fs):
        run(registry, state, "touch f hello  there")

        assert memory_fs.read_file("/home/user/f") == "hello there"

    def test_touch_empty_quotes_create_empty_file(self, registry, state, memory_fs):
        run(registry, state, 'touch f ""')

        assert memory_fs.read_file("/home/user/f") == ""
        assert state.mode is SessionMode.AWAITING_INPUT

    def test_touch_without_text_starts_body_entry(self, registry, state):
        lines = run(registry, state, "touch notes")

        assert state.mode is SessionMode.AWAITING_FILE_BODY
        assert state.pending_file.path == "/home/user/notes"
        assert "EOF" in lines[0].text

    def test_touch_body_entry_in_missing_directory(self, registry, state):
        lines = run(registry, state, "touch nope/notes")

        assert len(lines) == 1
        assert lines[0].category is LineCategory.ERROR
        assert state.mode is SessionMode.AWAITING_INPUT

    def test_missing_operand(self, registry, state):
        for name in ["touch", "mkdir", "rm", "rmdir", "cd", "cat"]:
            assert run(registry, state, name) == [
                StyledLine.error(f"{name}: missing operand")
            ]

    def test_mkdir_cd_pwd_round_trip(self, registry, state):
        original = texts(run(registry, state, "pwd"))[0]

        assert texts(run(registry, state, "mkdir d")) == ["Directory 'd' created."]
        assert run(registry, state, "cd d") == []
        assert texts(run(registry, state, "pwd")) == [original + "/d"]

        run(registry, state, "cd ..")
        assert texts(run(registry, state, "pwd")) == [original]

    def test_cd_dot_and_home(self, registry, state):
        run(registry, state, "mkdir d")
        run(registry, state, "cd ./d/.")
        assert state.current_directory == "/home/user/d"

        run(registry, state, "cd ~")
        assert state.current_directory == "/home/user"

    def test_cd_failure_keeps_directory(self, registry, state):
        lines = run(registry, state, "cd missing")

        assert len(lines) == 1
        assert lines[0].category is LineCategory.ERROR
        assert lines[0].text.startswith("cd: No such file or directory")
        assert state.current_directory == "/home/user"

    def test_rm_nonexistent(self, registry, state):
        lines = run(registry, state, "rm nonexistent")

        assert len(lines) == 1
        assert lines[0].category is LineCategory.ERROR
        assert state.current_directory == "/home/user"

    def test_rm_directory_is_error(self, registry, state):
        run(registry, state, "mkdir d")

        lines = run(registry, state, "rm d")

        assert lines[0].category is LineCategory.ERROR
        assert "Is a directory" in lines[0].text

    def test_rm_file(self, registry, state, memory_fs):
        run(registry, state, 'touch f "x"')

        assert texts(run(registry, state, "rm f")) == ["File 'f' deleted."]
        assert memory_fs.list_directory("/home/user") == []

    def test_rmdir(self, registry, state):
        run(registry, state, "mkdir d")
        run(registry, state, 'touch d/f "x"')

        non_empty = run(registry, state, "rmdir d")
        assert "Directory not empty" in non_empty[0].text

        run(registry, state, "rm d/f")
        assert texts(run(registry, state, "rmdir d")) == ["Directory 'd' removed."]

    def test_mkdir_existing(self, registry, state):
        run(registry, state, "mkdir d")

        lines = run(registry, state, "mkdir d")

        assert lines[0].category is LineCategory.ERROR
        assert "File exists" in lines[0].text

    def test_ls_empty_directory(self, registry, state):
        assert run(registry, state, "ls") == []

    def test_ls_lists_sorted_entries(self, registry, state):
        run(registry, state, "mkdir b")
        run(registry, state, 'touch a "1"')
        run(registry, state, 'touch b/c "2"')

        assert texts(run(registry, state, "ls")) == ["a", "b"]
        assert texts(run(registry, state, "ls b")) == ["c"]

    def test_cat_multiline_and_errors(self, registry, state, memory_fs):
        memory_fs.create_file("/home/user/f", "one\ntwo\n")
        run(registry, state, "mkdir d")

        assert texts(run(registry, state, "cat f")) == ["one", "two"]
        assert run(registry, state, "cat d")[0].category is LineCategory.ERROR
        assert run(registry, state, "cat ghost")[0].category is LineCategory.ERROR

    def test_clear_resets_view_only(self, registry, state):
        state.append([StyledLine.output("old")])

        assert run(registry, state, "clear") == []
        assert len(state.history) == 1
        assert state.visible_lines() == []

    def test_exit_stops_running(self, registry, state):
        assert run(registry, state, "exit") == []
        assert state.running is False

    def test_unexpected_error_becomes_error_line(self, state, mock_logger):
        fs = MagicMock(spec=FileSystemPort)
        fs.list_directory.side_effect = RuntimeError("boom")
        registry = CommandRegistry(fs, logger=mock_logger)

        lines = registry.dispatch(tokenize("ls"), state)

        assert lines == [StyledLine.error("ls: boom")]
        mock_logger.exception.assert_called_once()

    def test_filesystem_error_is_logged(self, state, mock_logger):
        fs = MagicMock(spec=FileSystemPort)
        fs.remove_file.side_effect = FileSystemError(
            FsErrorKind.PERMISSION_DENIED, "/home/user/f"
        )
        registry = CommandRegistry(fs, logger=mock_logger)

        lines = registry.dispatch(tokenize("rm f"), state)

        assert lines == [StyledLine.error("rm: Permission denied: /home/user/f")]
        mock_logger.warning.assert_called_once()
