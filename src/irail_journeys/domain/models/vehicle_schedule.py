"""Vehicle schedule domain models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class StopEvent:
    """A vehicle's scheduled call at one station."""

    station_id: str
    scheduled_arrival: datetime
    scheduled_departure: datetime


@dataclass(frozen=True)
class VehicleSchedule:
    """Full ordered stop schedule of a single vehicle."""

    vehicle_designation: str
    stops: list[StopEvent] = field(default_factory=list)
