"""Tests for parsing iRail vehicle responses."""

from datetime import UTC, datetime
from typing import Any

import pytest

from irail_journeys.adapters.irail_api import VehicleResponseParser
from irail_journeys.adapters.irail_api.vehicle_parser import epoch_to_datetime
from irail_journeys.domain.errors import MalformedResponse


def vehicle_response() -> dict[str, Any]:
    """A trimmed iRail /vehicle/ response with three stops."""
    return {
        "version": "1.1",
        "timestamp": "1574150400",
        "vehicle": "BE.NMBS.IC1832",
        "vehicleinfo": {"name": "BE.NMBS.IC1832", "shortname": "IC1832"},
        "stops": {
            "number": "3",
            "stop": [
                {
                    "id": "0",
                    "station": "Brussels-South/Brussels-Midi",
                    "stationinfo": {
                        "@id": "http://irail.be/stations/NMBS/008814001",
                        "id": "BE.NMBS.008814001",
                        "name": "Brussels-South/Brussels-Midi",
                    },
                    "time": "1574150400",
                    "scheduledDepartureTime": "1574150400",
                    "scheduledArrivalTime": "1574150400",
                },
                {
                    "id": "1",
                    "stationinfo": {"@id": "http://irail.be/stations/NMBS/008892007"},
                    "scheduledDepartureTime": "1574152500",
                    "scheduledArrivalTime": "1574152380",
                },
                {
                    "id": "2",
                    "stationinfo": {"@id": "http://irail.be/stations/NMBS/008891009"},
                    "scheduledDepartureTime": "1574153700",
                    "scheduledArrivalTime": "1574153700",
                },
            ],
        },
    }


def test_parses_designation_and_stops_in_order() -> None:
    """Given a vehicle response, when parsing, then stops keep their order and station ids."""
    schedule = VehicleResponseParser.parse("IC1832", vehicle_response())

    assert schedule.vehicle_designation == "BE.NMBS.IC1832"
    assert [s.station_id for s in schedule.stops] == [
        "http://irail.be/stations/NMBS/008814001",
        "http://irail.be/stations/NMBS/008892007",
        "http://irail.be/stations/NMBS/008891009",
    ]


def test_converts_epoch_strings_to_utc_datetimes() -> None:
    """Given epoch-second strings, when parsing, then scheduled times are aware UTC datetimes."""
    schedule = VehicleResponseParser.parse("IC1832", vehicle_response())

    ghent = schedule.stops[1]
    assert ghent.scheduled_arrival == datetime(2019, 11, 19, 8, 33, tzinfo=UTC)
    assert ghent.scheduled_departure == datetime(2019, 11, 19, 8, 35, tzinfo=UTC)


def test_epoch_to_datetime_is_utc() -> None:
    assert epoch_to_datetime(0) == datetime(1970, 1, 1, tzinfo=UTC)


def test_empty_stop_list_is_valid() -> None:
    """Given a vehicle without stops, when parsing, then the schedule has no stops."""
    data = {"vehicle": "BE.NMBS.IC1832", "stops": {"number": "0", "stop": []}}

    schedule = VehicleResponseParser.parse("IC1832", data)

    assert schedule.stops == []


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d.pop("vehicle"),
        lambda d: d.pop("stops"),
        lambda d: d["stops"]["stop"][0].pop("stationinfo"),
        lambda d: d["stops"]["stop"][1]["stationinfo"].pop("@id"),
        lambda d: d["stops"]["stop"][1].update(scheduledArrivalTime="soon"),
        lambda d: d["stops"]["stop"][2].pop("scheduledDepartureTime"),
    ],
    ids=[
        "no-vehicle",
        "no-stops",
        "no-stationinfo",
        "no-station-id",
        "non-numeric-time",
        "no-departure-time",
    ],
)
def test_unexpected_shape_raises_malformed_response(mutate: Any) -> None:
    """Given a response missing required fields, when parsing, then MalformedResponse is raised."""
    data = vehicle_response()
    mutate(data)

    with pytest.raises(MalformedResponse) as exc_info:
        VehicleResponseParser.parse("IC1832", data)

    assert exc_info.value.trip_id == "IC1832"


@pytest.mark.parametrize("data", [None, [], "error", 42])
def test_non_object_body_raises_malformed_response(data: Any) -> None:
    """Given a body that is not an object, when parsing, then MalformedResponse is raised."""
    with pytest.raises(MalformedResponse):
        VehicleResponseParser.parse("IC1832", data)


def test_out_of_range_time_raises_malformed_response() -> None:
    """Given an absurd epoch value, when parsing, then MalformedResponse is raised."""
    data = vehicle_response()
    data["stops"]["stop"][0]["scheduledArrivalTime"] = str(10**20)

    with pytest.raises(MalformedResponse):
        VehicleResponseParser.parse("IC1832", data)
