"""Unit tests for shell execution utilities."""

from unittest.mock import MagicMock, patch

from orphyctl.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult dataclass."""

    def test_success(self) -> None:
        assert CommandResult(stdout="", stderr="", returncode=0).success is True
        assert CommandResult(stdout="", stderr="", returncode=1).success is False

    def test_lines_strips_blanks(self) -> None:
        result = CommandResult(stdout="  htop\n\nvim  \n \n", stderr="", returncode=0)
        assert result.lines() == ["htop", "vim"]


class TestRunCommand:
    """Tests for run_command function."""

    @patch("orphyctl.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=3)

        result = run_command(["pacman", "-Qq"], timeout=5.0)

        assert result == CommandResult(stdout="out", stderr="err", returncode=3)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["errors"] == "replace"
        assert kwargs["timeout"] == 5.0


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("orphyctl.utils.shell.shutil.which", return_value="/usr/bin/htop")
    def test_found(self, mock_which: MagicMock) -> None:
        assert command_exists("htop") is True
        mock_which.assert_called_once_with("htop")

    @patch("orphyctl.utils.shell.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: MagicMock) -> None:
        assert command_exists("mozilla") is False

    @patch("orphyctl.utils.shell.shutil.which")
    def test_empty_name(self, mock_which: MagicMock) -> None:
        assert command_exists("") is False
        mock_which.assert_not_called()
