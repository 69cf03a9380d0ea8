"""Log file adapters."""

from irail_journeys.adapters.logs.log_directory_reader import LogDirectoryReader
from irail_journeys.adapters.logs.log_record_adapter import LogRecordAdapter

__all__ = ["LogDirectoryReader", "LogRecordAdapter"]
