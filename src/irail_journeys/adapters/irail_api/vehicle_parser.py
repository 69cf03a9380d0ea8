"""Parser for iRail vehicle responses."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from irail_journeys.domain.errors import MalformedResponse
from irail_journeys.domain.models import StopEvent, VehicleSchedule


class StationInfoPayload(BaseModel):
    """`stationinfo` block of a vehicle stop."""

    model_config = ConfigDict(populate_by_name=True)

    station_id: str = Field(alias="@id")


class StopPayload(BaseModel):
    """One entry of `stops.stop`."""

    model_config = ConfigDict(populate_by_name=True)

    stationinfo: StationInfoPayload
    # Epoch seconds, sent as strings by the API
    scheduled_arrival_time: int = Field(alias="scheduledArrivalTime")
    scheduled_departure_time: int = Field(alias="scheduledDepartureTime")


class StopsPayload(BaseModel):
    """`stops` block of a vehicle response."""

    stop: list[StopPayload] = Field(default_factory=list)


class VehiclePayload(BaseModel):
    """Top-level vehicle response."""

    vehicle: str
    stops: StopsPayload


def epoch_to_datetime(seconds: int) -> datetime:
    """Convert epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=UTC)


class VehicleResponseParser:
    """Parses iRail vehicle JSON into VehicleSchedule objects."""

    @staticmethod
    def parse(trip_id: str, data: Any) -> VehicleSchedule:
        """Validate a decoded response body and convert it.

        Raises:
            MalformedResponse: The body does not have the expected shape.
        """
        try:
            payload = VehiclePayload.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse(
                trip_id, f"unexpected vehicle response shape ({e.error_count()} error(s))"
            ) from e

        try:
            stops = [
                StopEvent(
                    station_id=stop.stationinfo.station_id,
                    scheduled_arrival=epoch_to_datetime(stop.scheduled_arrival_time),
                    scheduled_departure=epoch_to_datetime(stop.scheduled_departure_time),
                )
                for stop in payload.stops.stop
            ]
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedResponse(trip_id, f"invalid scheduled time: {e}") from e

        return VehicleSchedule(vehicle_designation=payload.vehicle, stops=stops)
