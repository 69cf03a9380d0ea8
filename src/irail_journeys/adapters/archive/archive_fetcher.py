"""Downloads and unpacks the daily iRail API log archives.

Archives are published as irailapi-YYYYMMDD.log.tar.gz below a fixed base URL.
"""

import logging
import tarfile
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import aiohttp

from irail_journeys.adapters.api_request_logger import log_api_request

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

IRAIL_LOGS_URL = "https://gtfs.irail.be/logs/"
DOWNLOAD_CHUNK_SIZE = 64 * 1024


def archive_name(day: date) -> str:
    """File name of the archive for one day."""
    return f"irailapi-{day:%Y%m%d}.log.tar.gz"


def days_between(start: date, end: date) -> list[date]:
    """All days from start to end, both inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


class ArchiveFetcher:
    """Fetches daily log archives and extracts them into a local directory."""

    def __init__(
        self,
        session: "ClientSession",
        archive_dir: Path,
        base_url: str = IRAIL_LOGS_URL,
        timeout_seconds: float = 300.0,
    ) -> None:
        self._session = session
        self._archive_dir = Path(archive_dir)
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_range(self, start: date, end: date) -> list[Path]:
        """Fetch every day's archive in [start, end].

        Days that fail to download or unpack are logged and skipped.

        Returns:
            Paths of all files extracted.
        """
        extracted: list[Path] = []
        for day in days_between(start, end):
            extracted.extend(await self.fetch_day(day))
        logger.info(f"Unpacked {len(extracted)} log file(s) into {self._archive_dir}")
        return extracted

    async def fetch_day(self, day: date) -> list[Path]:
        """Fetch and unpack a single day's archive."""
        url = f"{self._base_url}{archive_name(day)}"
        logger.info(f"Log file: {archive_name(day)}")
        log_api_request("GET", url)

        # The archive is streamed to a temporary file, never held in memory whole.
        with tempfile.TemporaryFile() as download:
            try:
                async with self._session.get(url, timeout=self._timeout) as response:
                    if response.status != 200:
                        logger.error(f"Log archive {url} returned status {response.status}")
                        return []
                    async for chunk in response.content.iter_chunked(DOWNLOAD_CHUNK_SIZE):
                        download.write(chunk)
            except (aiohttp.ClientError, TimeoutError) as e:
                logger.error(f"Error downloading log archive {url}: {e}")
                return []

            download.seek(0)
            try:
                return self.unpack(download)
            except (tarfile.TarError, OSError, EOFError) as e:
                logger.error(f"Error unpacking log archive {url}: {e}")
                return []

    def unpack(self, archive_file: BinaryIO) -> list[Path]:
        """Extract a gzip-compressed tar archive read from an open binary file."""
        self._archive_dir.mkdir(parents=True, exist_ok=True)
        with tarfile.open(fileobj=archive_file, mode="r:gz") as archive:
            members = [member for member in archive.getmembers() if member.isfile()]
            archive.extractall(self._archive_dir, members=members, filter="data")
        return [self._archive_dir / member.name for member in members]
