"""Reads newline-delimited log files from a directory tree."""

import logging
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class LogDirectoryReader:
    """Yields every line of every regular file below a directory, in path order."""

    def __init__(self, directory: Path, encoding: str = "utf-8") -> None:
        self._directory = Path(directory)
        self._encoding = encoding

    def files(self) -> list[Path]:
        """All regular files below the directory, sorted by path."""
        if not self._directory.is_dir():
            logger.warning(f"Log directory {self._directory} does not exist")
            return []
        return sorted(path for path in self._directory.rglob("*") if path.is_file())

    def lines(self) -> Iterator[tuple[str, int, str]]:
        """Yield (file name, 1-based line number, line without trailing newline)."""
        for path in self.files():
            logger.info(f"Reading log file {path}")
            with open(path, encoding=self._encoding, errors="replace") as f:
                for line_number, line in enumerate(f, start=1):
                    yield path.name, line_number, line.rstrip("\r\n")
