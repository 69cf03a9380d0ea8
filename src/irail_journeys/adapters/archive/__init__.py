"""Log archive adapters."""

from irail_journeys.adapters.archive.archive_fetcher import ArchiveFetcher, archive_name

__all__ = ["ArchiveFetcher", "archive_name"]
