"""Vehicle schedule client port."""

from typing import Protocol

from irail_journeys.domain.models.vehicle_schedule import VehicleSchedule


class VehicleScheduleClient(Protocol):
    """Port for retrieving a vehicle's full stop schedule."""

    async def fetch(self, trip_id: str) -> VehicleSchedule:
        """Fetch the schedule for a trip.

        Raises UpstreamUnavailable or MalformedResponse on failure.
        """
        ...
