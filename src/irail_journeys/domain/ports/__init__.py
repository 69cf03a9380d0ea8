"""Ports (interfaces) for the ports-and-adapters architecture."""

from irail_journeys.domain.ports.journey_sink import JourneySink
from irail_journeys.domain.ports.log_source import LogRecordParser, LogSource
from irail_journeys.domain.ports.vehicle_schedule_client import VehicleScheduleClient

__all__ = [
    "JourneySink",
    "LogRecordParser",
    "LogSource",
    "VehicleScheduleClient",
]
