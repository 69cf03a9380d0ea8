"""Domain models for journey reconstruction."""

from irail_journeys.domain.models.connection import Connection
from irail_journeys.domain.models.journey import Journey
from irail_journeys.domain.models.journey_option import JourneyOption, Leg
from irail_journeys.domain.models.log_record import CONNECTIONS_QUERY_TYPE, LogRecord
from irail_journeys.domain.models.query import Query
from irail_journeys.domain.models.route import Route
from irail_journeys.domain.models.vehicle_schedule import StopEvent, VehicleSchedule

__all__ = [
    "CONNECTIONS_QUERY_TYPE",
    "Connection",
    "Journey",
    "JourneyOption",
    "Leg",
    "LogRecord",
    "Query",
    "Route",
    "StopEvent",
    "VehicleSchedule",
]
