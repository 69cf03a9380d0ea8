"""Log source and log record parser ports."""

from collections.abc import Iterator
from typing import Protocol

from irail_journeys.domain.models.log_record import LogRecord


class LogSource(Protocol):
    """Port for reading raw log lines."""

    def lines(self) -> Iterator[tuple[str, int, str]]:
        """Yield (source name, line number, raw line) for every log line."""
        ...


class LogRecordParser(Protocol):
    """Port for turning a raw log line into a LogRecord."""

    def parse(self, line: str) -> LogRecord:
        """Parse a line, raising InvalidJson or MalformedQuery on bad input."""
        ...
