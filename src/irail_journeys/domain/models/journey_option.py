"""Journey option domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Leg:
    """One vehicle-bound segment of an abstract journey option."""

    trip_id: str
    departure_stop: str
    arrival_stop: str


@dataclass(frozen=True)
class JourneyOption:
    """An ordered chain of legs returned to the user for one query."""

    legs: list[Leg] = field(default_factory=list)
