"""Unit tests for the interactive disposition loop."""

import os
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from orphyctl.cleanup.disposition import INVALID_OPTION_MESSAGE, DispositionLoop, prompt_text
from orphyctl.cleanup.operator import DeletionResult, FolderOperator


def _answers(values: Iterable[str]) -> tuple[Callable[[str], str], list[str]]:
    """Create a prompt function replaying ``values`` and recording prompts."""
    remaining = list(values)
    prompts: list[str] = []

    def prompt(text: str) -> str:
        prompts.append(text)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return prompt, prompts


@pytest.fixture
def folders(tmp_path: Path) -> list[str]:
    """Three orphaned folders with content."""
    paths = []
    for name in ("c-app", "a-app", "b-app"):
        folder = tmp_path / name
        folder.mkdir()
        (folder / "config.ini").write_text("x=1")
        paths.append(str(folder))
    return paths


class TestPromptText:
    """Tests for prompt_text function."""

    def test_format(self) -> None:
        assert prompt_text("/h/.config/x") == "Action for: /h/.config/x [K/D/S/Q]:"

    def test_undecodable_bytes_replaced(self) -> None:
        raw = os.fsdecode(b"/h/.config/bad\xffname")

        assert prompt_text(raw) == "Action for: /h/.config/bad\ufffdname [K/D/S/Q]:"


class TestDispositionLoop:
    """Tests for DispositionLoop."""

    def test_folders_visited_in_sorted_order(self, folders: list[str]) -> None:
        prompt, prompts = _answers(["k", "k", "k"])
        echo = MagicMock()

        DispositionLoop(prompt, echo).run(folders)

        assert prompts == [prompt_text(p) for p in sorted(folders)]

    def test_delete_removes_folder_and_counts(self, folders: list[str]) -> None:
        """'d' deletes the folder and increments deleted by one."""
        target = sorted(folders)[0]
        prompt, _ = _answers(["d", "k", "k"])

        summary = DispositionLoop(prompt, MagicMock()).run(folders)

        assert summary.deleted == 1
        assert not Path(target).exists()
        assert summary.kept == 2

    def test_keep_and_skip_counted_separately(self, folders: list[str]) -> None:
        """Keep and skip leave folders alone but use separate counters."""
        prompt, _ = _answers(["k", "s", "S"])

        summary = DispositionLoop(prompt, MagicMock()).run(folders)

        assert (summary.kept, summary.deleted, summary.skipped) == (1, 0, 2)
        assert all(Path(p).exists() for p in folders)
        assert summary.total == len(folders)
        assert summary.quit is False

    def test_input_is_case_insensitive(self, folders: list[str]) -> None:
        prompt, _ = _answers(["K", " D ", "s"])

        summary = DispositionLoop(prompt, MagicMock()).run(folders)

        assert (summary.kept, summary.deleted, summary.skipped) == (1, 1, 1)

    def test_invalid_input_reprompts_same_folder(self, folders: list[str]) -> None:
        """Invalid answers do not consume a folder."""
        prompt, prompts = _answers(["x", "", "yes", "k", "k", "k"])
        echo = MagicMock()

        summary = DispositionLoop(prompt, echo).run(folders)

        first = prompt_text(sorted(folders)[0])
        assert prompts[:4] == [first] * 4
        assert summary.kept == 3
        invalid_messages = [c for c in echo.call_args_list if INVALID_OPTION_MESSAGE in c.args[0]]
        assert len(invalid_messages) == 3

    def test_quit_leaves_remaining_untouched(self, folders: list[str]) -> None:
        """Quit stops immediately; unvisited folders are not counted."""
        ordered = sorted(folders)
        prompt, prompts = _answers(["d", "q", "d"])

        summary = DispositionLoop(prompt, MagicMock()).run(folders)

        assert summary.quit is True
        assert summary.deleted == 1
        assert summary.total == 1
        assert summary.total < len(folders)
        assert not Path(ordered[0]).exists()
        assert Path(ordered[1]).exists()
        assert Path(ordered[2]).exists()
        assert len(prompts) == 2

    def test_eof_is_treated_as_quit(self, folders: list[str]) -> None:
        prompt, _ = _answers(["k"])

        summary = DispositionLoop(prompt, MagicMock()).run(folders)

        assert summary.quit is True
        assert summary.kept == 1
        assert all(Path(p).exists() for p in folders)

    def test_failed_delete_reported_and_loop_continues(self, folders: list[str]) -> None:
        """A failed deletion credits no counter and moves to the next folder."""
        ordered = sorted(folders)
        operator = MagicMock(spec=FolderOperator)
        operator.delete.return_value = DeletionResult(
            path=ordered[0], success=False, error="Permission denied"
        )
        prompt, prompts = _answers(["d", "k", "s"])
        echo = MagicMock()

        summary = DispositionLoop(prompt, echo, operator).run(folders)

        assert summary.failed == [ordered[0]]
        assert (summary.kept, summary.deleted, summary.skipped) == (1, 0, 1)
        assert len(prompts) == 3
        messages = [c.args[0] for c in echo.call_args_list]
        assert any("could not delete: Permission denied" in m for m in messages)

    def test_empty_input(self) -> None:
        """No folders means no prompts and zero counts."""
        prompt, prompts = _answers([])

        summary = DispositionLoop(prompt, MagicMock()).run([])

        assert prompts == []
        assert summary.total == 0
        assert summary.quit is False
