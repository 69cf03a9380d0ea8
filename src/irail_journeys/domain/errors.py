"""Error taxonomy for log parsing, vehicle lookups and reconstruction.

Every error here is scoped to a single log line: callers skip the line and
keep going.
"""


class ParseError(Exception):
    """A raw log line could not be parsed."""


class InvalidJson(ParseError):
    """A log line is not a JSON object."""

    def __init__(self, reason: str, line: str = "") -> None:
        super().__init__(reason)
        self.reason = reason
        self.line = line


class VehicleScheduleError(Exception):
    """The vehicle lookup service did not produce a usable schedule."""

    def __init__(self, trip_id: str, reason: str) -> None:
        super().__init__(f"{trip_id}: {reason}")
        self.trip_id = trip_id
        self.reason = reason


class UpstreamUnavailable(VehicleScheduleError):
    """Non-success status, transport error or timeout from the lookup service."""

    def __init__(self, trip_id: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(trip_id, reason)
        self.status_code = status_code


class MalformedResponse(VehicleScheduleError):
    """The lookup service answered, but not with the expected shape."""


class ReconstructionError(Exception):
    """A journey could not be reconstructed from its log line."""


class IncompleteVehicleData(ReconstructionError):
    """A vehicle schedule needed by one of the legs could not be fetched."""

    def __init__(self, trip_id: str, reason: str) -> None:
        super().__init__(f"Incomplete vehicle data for {trip_id}: {reason}")
        self.trip_id = trip_id
        self.reason = reason


class MalformedQuery(ReconstructionError):
    """The logged query has an unparseable timestamp or misses a required field."""
