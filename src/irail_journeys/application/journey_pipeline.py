"""Pipeline from raw log lines to persisted journeys."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from irail_journeys.domain.errors import ParseError, ReconstructionError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from irail_journeys.application.journey_reconstructor import JourneyReconstructor
    from irail_journeys.domain.ports import JourneySink, LogRecordParser, LogSource


@dataclass
class PipelineReport:
    """Counters for one pipeline run."""

    lines_read: int = 0
    ignored: int = 0
    parse_failures: int = 0
    reconstruction_failures: int = 0
    write_failures: int = 0
    journeys_written: int = 0

    @property
    def failures(self) -> int:
        """Total number of skipped lines due to errors."""
        return self.parse_failures + self.reconstruction_failures + self.write_failures


class JourneyPipeline:
    """Reads log lines, reconstructs connections queries and writes the results.

    Every failure is scoped to its own line: it is logged, counted and skipped.
    """

    def __init__(
        self,
        source: "LogSource",
        parser: "LogRecordParser",
        reconstructor: "JourneyReconstructor",
        sink: "JourneySink",
    ) -> None:
        self._source = source
        self._parser = parser
        self._reconstructor = reconstructor
        self._sink = sink

    async def run(self) -> PipelineReport:
        """Process every line of the log source once."""
        report = PipelineReport()

        for source_name, line_number, line in self._source.lines():
            if not line.strip():
                continue
            report.lines_read += 1
            await self._process_line(report, f"{source_name}:{line_number}", line)

        logger.info(
            f"Processed {report.lines_read} line(s): {report.journeys_written} journey(s) written, "
            f"{report.ignored} ignored, {report.parse_failures} unparseable, "
            f"{report.reconstruction_failures} failed reconstruction, {report.write_failures} not written"
        )
        return report

    async def _process_line(self, report: PipelineReport, location: str, line: str) -> None:
        try:
            record = self._parser.parse(line)
        except ParseError as e:
            report.parse_failures += 1
            logger.warning(f"Skipping {location}: {e}")
            return
        except ReconstructionError as e:
            report.reconstruction_failures += 1
            logger.warning(f"Skipping {location}: {e}")
            return

        if not record.is_connections_query or record.query is None:
            report.ignored += 1
            return

        try:
            journey = await self._reconstructor.reconstruct(record.query, record.options)
        except ReconstructionError as e:
            report.reconstruction_failures += 1
            logger.warning(f"Skipping {location}: {e}")
            return

        try:
            path = self._sink.write(journey)
        except OSError as e:
            report.write_failures += 1
            logger.error(f"Could not write journey for {location}: {e}")
            return

        report.journeys_written += 1
        logger.debug(f"Wrote journey for {location} to {path}")
