"""Tests for the interactive command shell."""

import io

import pytest

from indexedseq import IndexedSequence
from indexedseq.shell import MENU, Shell, main


def run_script(script: str, sequence: IndexedSequence | None = None) -> tuple[int, list[str], IndexedSequence]:
    seq = sequence if sequence is not None else IndexedSequence()
    out = io.StringIO()
    shell = Shell(seq, stdin=io.StringIO(script), stdout=out, interactive=False)
    code = shell.run()
    return code, out.getvalue().splitlines(), seq


def test_insert_print_size() -> None:
    """Test the basic command flow."""
    code, lines, seq = run_script("insert 0 10\ninsert 1 20\ninsert 1 15\nprint\nsize\nquit\n")
    assert code == 0
    assert lines == ["10 -> 15 -> 20 -> END", "Current size: 3"]
    assert list(seq) == [10, 15, 20]


def test_get_and_remove() -> None:
    """Test get output and removal."""
    code, lines, seq = run_script("get 1\nremove 0\nprint\n", IndexedSequence([1, 2, 3]))
    assert code == 0
    assert lines == ["Value at index 1 = 2", "2 -> 3 -> END"]


def test_invalid_index_keeps_running() -> None:
    """Test that out-of-range commands report and continue."""
    code, lines, seq = run_script("get 0\ninsert 5 1\nremove 0\nsize\n")
    assert code == 0
    assert lines == ["invalid index", "invalid index", "invalid index", "Current size: 0"]
    assert seq.size() == 0


def test_menu_aliases() -> None:
    """Test the numeric menu choices."""
    code, lines, seq = run_script("1 0 7\n1 1 8\n3 0\n2 1\n4\n5\n0\nprint\n")
    assert code == 0
    assert lines == ["Value at index 0 = 7", "7 -> END", "Current size: 1"]


def test_bad_input() -> None:
    """Test unknown commands and malformed arguments."""
    code, lines, _ = run_script("frobnicate\ninsert 1\nget x\n\nEXIT\n")
    assert code == 0
    assert lines == [
        "Invalid choice",
        "usage: insert <position> <value>",
        "usage: get <position>",
    ]


def test_eof_exits_cleanly() -> None:
    """Test that end of input ends the loop with success."""
    code, lines, _ = run_script("insert 0 1")
    assert code == 0
    assert lines == []


def test_help_lists_commands() -> None:
    """Test the help command."""
    _, lines, _ = run_script("help\n")
    assert lines[0] == MENU
    assert "  insert <position> <value>" in lines


def test_interactive_prompt() -> None:
    """Test that interactive mode shows the menu and prompt."""
    out = io.StringIO()
    Shell(IndexedSequence(), stdin=io.StringIO("size\nquit\n"), stdout=out).run()
    text = out.getvalue()
    assert text.startswith(MENU + "\n")
    assert text.count(Shell.PROMPT) == 2


def test_main_runs_quiet(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the console entry point."""
    monkeypatch.setattr("sys.stdin", io.StringIO("insert 0 3\nprint\nquit\n"))
    assert main(["--quiet", "--capacity", "2"]) == 0
    assert capsys.readouterr().out == "3 -> END\n"


def test_main_rejects_bad_capacity() -> None:
    """Test that a non-positive capacity is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--capacity", "0"])
    assert exc_info.value.code == 2
