"""Connection domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Connection:
    """A physically traveled segment on a single vehicle.

    Spans the traveler's boarding point to their alighting point for one leg.
    Intermediate stops of the vehicle are not represented.
    """

    departure_time: datetime
    arrival_time: datetime
    departure_stop: str
    arrival_stop: str
    vehicle: str
