"""Behavior tests for JourneyPipeline."""

import json
from collections.abc import Iterator

import pytest

from irail_journeys.adapters.logs import LogRecordAdapter
from irail_journeys.application import JourneyPipeline, JourneyReconstructor
from irail_journeys.domain.errors import UpstreamUnavailable
from irail_journeys.domain.models import VehicleSchedule
from tests.doubles import (
    FailingJourneySink,
    FakeVehicleScheduleClient,
    MemoryJourneySink,
    stop,
)


class ListLogSource:
    """Log source over an in-memory list of lines."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines

    def lines(self) -> Iterator[tuple[str, int, str]]:
        for number, line in enumerate(self._lines, start=1):
            yield "irailapi-20191119.log", number, line


def connections_line(trip: str = "T1", departure: str = "S1", arrival: str = "S3") -> str:
    return json.dumps(
        {
            "querytime": "2019-11-19T08:00:00+01:00",
            "querytype": "connections",
            "user_agent": "iRail-test/1.0",
            "query": {
                "departureStop": departure,
                "arrivalStop": arrival,
                "journeyoptions": [
                    {"journeys": [{"trip": trip, "departureStop": departure, "arrivalStop": arrival}]}
                ],
            },
        }
    )


@pytest.fixture
def client() -> FakeVehicleScheduleClient:
    return FakeVehicleScheduleClient(
        {"T1": VehicleSchedule("IC1832", [stop("S1", 0), stop("S2", 10), stop("S3", 20)])},
        failures={"BROKEN": UpstreamUnavailable("BROKEN", "vehicle API returned status 500", 500)},
    )


def build_pipeline(
    lines: list[str], client: FakeVehicleScheduleClient, sink: MemoryJourneySink
) -> JourneyPipeline:
    return JourneyPipeline(
        source=ListLogSource(lines),
        parser=LogRecordAdapter(),
        reconstructor=JourneyReconstructor(client),
        sink=sink,
    )


@pytest.mark.asyncio
async def test_connections_line_is_reconstructed_and_written(
    client: FakeVehicleScheduleClient,
) -> None:
    """Given one connections line, when running, then one journey reaches the sink."""
    sink = MemoryJourneySink()

    report = await build_pipeline([connections_line()], client, sink).run()

    assert report.lines_read == 1
    assert report.journeys_written == 1
    assert len(sink.journeys) == 1
    connection = sink.journeys[0].routes[0].connections[0]
    assert (connection.departure_stop, connection.arrival_stop) == ("S1", "S3")


@pytest.mark.asyncio
async def test_stations_line_produces_no_output(client: FakeVehicleScheduleClient) -> None:
    """Given a stations query, when running, then nothing is reconstructed nor written."""
    sink = MemoryJourneySink()
    line = json.dumps({"querytime": "2019-11-19T08:00:00+01:00", "querytype": "stations"})

    report = await build_pipeline([line], client, sink).run()

    assert report.ignored == 1
    assert report.journeys_written == 0
    assert sink.journeys == []
    assert client.fetched == []


@pytest.mark.asyncio
async def test_bad_lines_are_skipped_and_counted(client: FakeVehicleScheduleClient) -> None:
    """Given a mix of good and bad lines, when running, then only bad lines are skipped."""
    sink = MemoryJourneySink()
    lines = [
        "{not json",
        connections_line(),
        connections_line(trip="BROKEN"),
        json.dumps({"querytype": "connections", "querytime": "nope", "query": {}}),
        "",
        connections_line(),
    ]

    report = await build_pipeline(lines, client, sink).run()

    assert report.lines_read == 5
    assert report.parse_failures == 1
    assert report.reconstruction_failures == 2
    assert report.failures == 3
    assert report.journeys_written == 2
    assert len(sink.journeys) == 2


@pytest.mark.asyncio
async def test_failed_journey_is_not_partially_written(client: FakeVehicleScheduleClient) -> None:
    """Given a two-option line whose second option fails, when running, then nothing is written."""
    sink = MemoryJourneySink()
    line = json.dumps(
        {
            "querytime": "2019-11-19T08:00:00+01:00",
            "querytype": "connections",
            "user_agent": "iRail-test/1.0",
            "query": {
                "departureStop": "S1",
                "arrivalStop": "S3",
                "journeyoptions": [
                    {"journeys": [{"trip": "T1", "departureStop": "S1", "arrivalStop": "S3"}]},
                    {"journeys": [{"trip": "BROKEN", "departureStop": "S1", "arrivalStop": "S3"}]},
                ],
            },
        }
    )

    report = await build_pipeline([line], client, sink).run()

    assert report.reconstruction_failures == 1
    assert sink.journeys == []


@pytest.mark.asyncio
async def test_write_failure_is_counted_and_run_continues(client: FakeVehicleScheduleClient) -> None:
    """Given a sink failing its first write, when running two lines, then the second is still written."""
    sink = FailingJourneySink(failing_writes=1)

    report = await build_pipeline([connections_line(), connections_line()], client, sink).run()

    assert report.lines_read == 2
    assert report.write_failures == 1
    assert report.failures == 1
    assert report.journeys_written == 1
    assert len(sink.journeys) == 1
