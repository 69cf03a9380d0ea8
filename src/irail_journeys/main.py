"""Main entry point: fetch the log archives and reconstruct every journey once."""

import asyncio
import logging
import sys

import aiohttp

from irail_journeys.adapters.api_rate_limiter import ApiRateLimiter
from irail_journeys.adapters.archive import ArchiveFetcher
from irail_journeys.adapters.config import AppConfig
from irail_journeys.adapters.irail_api import IrailVehicleScheduleClient
from irail_journeys.adapters.logs import LogDirectoryReader, LogRecordAdapter
from irail_journeys.adapters.output import JsonFileJourneySink
from irail_journeys.application import JourneyPipeline, JourneyReconstructor, PipelineReport

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for a pipeline run."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main(config: AppConfig | None = None) -> PipelineReport:
    """Run the full pipeline once."""
    config = config or AppConfig()

    async with aiohttp.ClientSession() as session:
        if config.fetch_archives:
            fetcher = ArchiveFetcher(
                session=session,
                archive_dir=config.archive_dir,
                base_url=config.log_archive_url,
            )
            await fetcher.fetch_range(config.archive_start_date, config.archive_end_date)
            logger.info("Unpacking OK, reconstructing journeys...")

        vehicle_client = IrailVehicleScheduleClient(
            session=session,
            base_url=config.vehicle_api_url,
            timeout_seconds=config.vehicle_api_timeout,
            rate_limiter=ApiRateLimiter("irail_vehicle", config.vehicle_api_min_delay_seconds),
        )
        pipeline = JourneyPipeline(
            source=LogDirectoryReader(config.archive_dir),
            parser=LogRecordAdapter(),
            reconstructor=JourneyReconstructor(
                vehicle_client, max_concurrent_fetches=config.max_concurrent_fetches
            ),
            sink=JsonFileJourneySink(config.output_dir),
        )
        report = await pipeline.run()

    logger.info(f"Reconstruction complete! {report.journeys_written} journey(s) written")
    return report


def run() -> None:
    """Console script entry point."""
    config = AppConfig()
    configure_logging(config.log_level)
    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
        sys.exit(130)


if __name__ == "__main__":
    run()
