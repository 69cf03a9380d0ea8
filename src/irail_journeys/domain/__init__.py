"""Domain layer - core models, errors and ports."""

from irail_journeys.domain.models import (
    Connection,
    Journey,
    JourneyOption,
    Leg,
    LogRecord,
    Query,
    Route,
    StopEvent,
    VehicleSchedule,
)
from irail_journeys.domain.ports import (
    JourneySink,
    LogRecordParser,
    LogSource,
    VehicleScheduleClient,
)

__all__ = [
    "Connection",
    "Journey",
    "JourneyOption",
    "JourneySink",
    "Leg",
    "LogRecord",
    "LogRecordParser",
    "LogSource",
    "Query",
    "Route",
    "StopEvent",
    "VehicleSchedule",
    "VehicleScheduleClient",
]
