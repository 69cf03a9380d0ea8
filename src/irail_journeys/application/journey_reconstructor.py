"""Journey reconstruction (core use case).

Turns the abstract journey options of a logged query into concrete routes by
walking each involved vehicle's full stop schedule.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from irail_journeys.domain.errors import IncompleteVehicleData, VehicleScheduleError
from irail_journeys.domain.models import (
    Connection,
    Journey,
    JourneyOption,
    Leg,
    Query,
    Route,
    VehicleSchedule,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from irail_journeys.domain.ports import VehicleScheduleClient


class BoardingState(Enum):
    """Scan state while walking a vehicle's stops for one leg."""

    SEEKING = "seeking"
    BOARDED = "boarded"


@dataclass
class _Cursor:
    """Where and when the traveler boarded the vehicle."""

    stop: str
    time: datetime


class LegScanner:
    """State machine extracting the traveled Connection of one leg.

    Transitions, evaluated per stop event in vehicle order:
    - arrival stop reached: scanning ends; if boarded, one Connection is emitted.
    - departure stop reached: SEEKING -> BOARDED, cursor set to its departure.
    - any other stop: ignored (intermediate stops are elided).
    """

    def __init__(self, leg: Leg, schedule: VehicleSchedule) -> None:
        self._leg = leg
        self._schedule = schedule
        self.state = BoardingState.SEEKING
        self._cursor: _Cursor | None = None

    def scan(self) -> list[Connection]:
        """Return the Connection for this leg, or nothing if it was never traveled."""
        for event in self._schedule.stops:
            # Arrival wins over departure so a degenerate leg yields nothing.
            if event.station_id == self._leg.arrival_stop:
                if self.state is BoardingState.BOARDED and self._cursor is not None:
                    return [
                        Connection(
                            departure_time=self._cursor.time,
                            arrival_time=event.scheduled_arrival,
                            departure_stop=self._cursor.stop,
                            arrival_stop=event.station_id,
                            vehicle=self._schedule.vehicle_designation,
                        )
                    ]
                logger.debug(
                    f"Reached {event.station_id} on {self._schedule.vehicle_designation} "
                    f"before boarding at {self._leg.departure_stop}"
                )
                return []

            if event.station_id == self._leg.departure_stop:
                self.state = BoardingState.BOARDED
                self._cursor = _Cursor(stop=event.station_id, time=event.scheduled_departure)

        if self.state is BoardingState.SEEKING:
            logger.debug(
                f"Vehicle {self._schedule.vehicle_designation} never calls at "
                f"{self._leg.departure_stop} (trip {self._leg.trip_id})"
            )
        else:
            logger.debug(
                f"Vehicle {self._schedule.vehicle_designation} never reaches "
                f"{self._leg.arrival_stop} after boarding (trip {self._leg.trip_id})"
            )
        return []


class JourneyReconstructor:
    """Rebuilds Journeys from logged queries using a vehicle schedule client."""

    def __init__(
        self,
        vehicle_client: "VehicleScheduleClient",
        max_concurrent_fetches: int = 1,
    ) -> None:
        """Initialize with a vehicle schedule client.

        Args:
            vehicle_client: Client used to fetch one schedule per leg.
            max_concurrent_fetches: Upper bound on simultaneous fetches within one
                journey option. 1 fetches legs strictly one after another.
        """
        if max_concurrent_fetches < 1:
            raise ValueError("max_concurrent_fetches must be at least 1")
        self._vehicle_client = vehicle_client
        self._max_concurrent_fetches = max_concurrent_fetches

    async def reconstruct(self, query: Query, options: list[JourneyOption]) -> Journey:
        """Reconstruct one Route per journey option.

        Raises:
            IncompleteVehicleData: A schedule for any leg could not be fetched.
                No partial Journey is returned in that case.
        """
        routes = []
        for option in options:
            routes.append(await self.reconstruct_option(option))
        return Journey(query=query, routes=routes)

    async def reconstruct_option(self, option: JourneyOption) -> Route:
        """Build the Route for a single journey option."""
        schedules = await self._fetch_schedules(option.legs)

        connections: list[Connection] = []
        # One transfer per vehicle boarded after the first.
        transfers = -1
        for leg, schedule in zip(option.legs, schedules, strict=True):
            connections.extend(LegScanner(leg, schedule).scan())
            transfers += 1

        return Route(connections=connections, transfers=max(transfers, 0))

    async def _fetch_schedules(self, legs: list[Leg]) -> list[VehicleSchedule]:
        """Fetch every leg's schedule, preserving leg order."""
        if self._max_concurrent_fetches == 1:
            return [await self._fetch(leg) for leg in legs]

        semaphore = asyncio.Semaphore(self._max_concurrent_fetches)

        async def fetch_bounded(leg: Leg) -> VehicleSchedule:
            async with semaphore:
                return await self._fetch(leg)

        # The task group cancels and awaits the remaining fetches on the first failure.
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(fetch_bounded(leg)) for leg in legs]
        except ExceptionGroup as failure:
            incomplete = [e for e in failure.exceptions if isinstance(e, IncompleteVehicleData)]
            if not incomplete:
                raise
            raise incomplete[0] from incomplete[0].__cause__

        return [task.result() for task in tasks]

    async def _fetch(self, leg: Leg) -> VehicleSchedule:
        try:
            return await self._vehicle_client.fetch(leg.trip_id)
        except VehicleScheduleError as e:
            logger.error(f"Could not fetch vehicle {leg.trip_id}: {e.reason}")
            raise IncompleteVehicleData(leg.trip_id, e.reason) from e
