"""Tests for LogDirectoryReader."""

from pathlib import Path

from irail_journeys.adapters.logs import LogDirectoryReader


def test_yields_lines_of_all_files_in_path_order(tmp_path: Path) -> None:
    """Given log files in nested directories, when reading, then lines come in sorted path order."""
    (tmp_path / "b").mkdir()
    (tmp_path / "a-irailapi-20191101.log").write_text('{"n": 1}\n{"n": 2}\n', encoding="utf-8")
    (tmp_path / "b" / "irailapi-20191102.log").write_text('{"n": 3}', encoding="utf-8")

    lines = list(LogDirectoryReader(tmp_path).lines())

    assert lines == [
        ("a-irailapi-20191101.log", 1, '{"n": 1}'),
        ("a-irailapi-20191101.log", 2, '{"n": 2}'),
        ("irailapi-20191102.log", 1, '{"n": 3}'),
    ]


def test_strips_windows_line_endings(tmp_path: Path) -> None:
    (tmp_path / "irailapi.log").write_bytes(b'{"n": 1}\r\n')

    assert [line for _, _, line in LogDirectoryReader(tmp_path).lines()] == ['{"n": 1}']


def test_missing_directory_yields_nothing(tmp_path: Path) -> None:
    """Given a directory that does not exist, when reading, then no lines are produced."""
    assert list(LogDirectoryReader(tmp_path / "missing").lines()) == []


def test_invalid_utf8_is_replaced(tmp_path: Path) -> None:
    """Given a file with a broken byte, when reading, then the line is still yielded."""
    (tmp_path / "irailapi.log").write_bytes(b'{"ua": "\xff"}\n')

    lines = list(LogDirectoryReader(tmp_path).lines())

    assert len(lines) == 1
    assert lines[0][2].startswith('{"ua": ')
