"""Adapter turning raw iRail API log lines into LogRecords.

A connections log line looks like::

    {"querytime": "2019-11-01T08:00:00+01:00", "querytype": "connections",
     "user_agent": "...",
     "query": {"departureStop": "...", "arrivalStop": "...",
               "journeyoptions": [{"journeys": [
                   {"trip": "...", "departureStop": "...", "arrivalStop": "..."}]}]}}
"""

import json
import logging
import re

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, ValidationError, field_validator

from irail_journeys.domain.errors import InvalidJson, MalformedQuery
from irail_journeys.domain.models import (
    CONNECTIONS_QUERY_TYPE,
    JourneyOption,
    Leg,
    LogRecord,
    Query,
)

logger = logging.getLogger(__name__)

# Date and time parts of an RFC 3339 timestamp; epoch numbers never match.
RFC3339_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")


class LogEnvelope(BaseModel):
    """Fields shared by every log line, whatever its query type."""

    query_type: str | None = Field(default=None, alias="querytype")


class LegPayload(BaseModel):
    """One entry of `journeyoptions[].journeys`."""

    model_config = ConfigDict(populate_by_name=True)

    trip: str
    departure_stop: str = Field(alias="departureStop")
    arrival_stop: str = Field(alias="arrivalStop")


class JourneyOptionPayload(BaseModel):
    """One entry of `journeyoptions`."""

    journeys: list[LegPayload] = Field(default_factory=list)


class ConnectionsQueryPayload(BaseModel):
    """The `query` object of a connections log line."""

    model_config = ConfigDict(populate_by_name=True)

    departure_stop: str = Field(alias="departureStop")
    arrival_stop: str = Field(alias="arrivalStop")
    journey_options: list[JourneyOptionPayload] = Field(
        default_factory=list, alias="journeyoptions"
    )


class ConnectionsLogEntry(BaseModel):
    """A complete connections log line."""

    model_config = ConfigDict(populate_by_name=True)

    query_time: AwareDatetime = Field(alias="querytime")
    query_type: str = Field(alias="querytype")
    user_agent: str
    query: ConnectionsQueryPayload

    @field_validator("query_time", mode="before")
    @classmethod
    def validate_query_time(cls, v: object) -> object:
        """Only accept RFC 3339 strings, not epoch seconds."""
        if not isinstance(v, str) or not RFC3339_PREFIX.match(v):
            raise ValueError("querytime must be an RFC 3339 timestamp")
        return v

    def to_query(self) -> Query:
        return Query(
            departure_stop=self.query.departure_stop,
            arrival_stop=self.query.arrival_stop,
            query_time=self.query_time,
            user_agent=self.user_agent,
            query_type=self.query_type,
        )

    def to_options(self) -> list[JourneyOption]:
        return [
            JourneyOption(
                legs=[
                    Leg(
                        trip_id=leg.trip,
                        departure_stop=leg.departure_stop,
                        arrival_stop=leg.arrival_stop,
                    )
                    for leg in option.journeys
                ]
            )
            for option in self.query.journey_options
        ]


def _describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic error as 'field.path: message; ...'."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


class LogRecordAdapter:
    """Parses iRail API log lines.

    Only connections queries are validated in full; other query types are
    returned with their type alone and never fail beyond invalid JSON.
    """

    def parse(self, line: str) -> LogRecord:
        """Parse a raw log line.

        Raises:
            InvalidJson: The line is not a JSON object.
            MalformedQuery: A connections query misses a field or has a bad querytime.
        """
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise InvalidJson(f"invalid JSON: {e.msg} at position {e.pos}", line) from e

        if not isinstance(data, dict):
            raise InvalidJson("log line is not a JSON object", line)

        try:
            envelope = LogEnvelope.model_validate(data)
        except ValidationError as e:
            raise InvalidJson(f"unexpected log envelope: {_describe_validation_error(e)}", line) from e

        if envelope.query_type != CONNECTIONS_QUERY_TYPE:
            return LogRecord(query_type=envelope.query_type or "")

        try:
            entry = ConnectionsLogEntry.model_validate(data)
        except ValidationError as e:
            raise MalformedQuery(
                f"malformed connections query: {_describe_validation_error(e)}"
            ) from e

        return LogRecord(
            query_type=entry.query_type,
            query=entry.to_query(),
            options=entry.to_options(),
        )
