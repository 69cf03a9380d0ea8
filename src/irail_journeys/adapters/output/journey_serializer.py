"""JSON document schema for reconstructed journeys.

Field names follow the iRail API casing (departureTime, gtfs:vehicle, ...);
timestamps are written in UTC as YYYY-MM-DDTHH:MM:SS.00Z.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from irail_journeys.domain.models import Connection, Journey, Query, Route

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.00Z"


def format_timestamp(value: datetime) -> str:
    """Format an aware datetime as a UTC output timestamp."""
    return value.astimezone(UTC).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse an output timestamp back into an aware UTC datetime."""
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=UTC)


def _parse_if_string(value: Any) -> Any:
    return parse_timestamp(value) if isinstance(value, str) else value


class QueryDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    departure_stop: str = Field(alias="departureStop")
    arrival_stop: str = Field(alias="arrivalStop")
    query_time: datetime
    user_agent: str
    query_type: str

    @field_validator("query_time", mode="before")
    @classmethod
    def _parse_time(cls, v: Any) -> Any:
        return _parse_if_string(v)

    @field_serializer("query_time")
    def _serialize_time(self, value: datetime) -> str:
        return format_timestamp(value)


class ConnectionDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    departure_time: datetime = Field(alias="departureTime")
    arrival_time: datetime = Field(alias="arrivalTime")
    departure_stop: str = Field(alias="departureStop")
    arrival_stop: str = Field(alias="arrivalStop")
    vehicle: str = Field(alias="gtfs:vehicle")

    @field_validator("departure_time", "arrival_time", mode="before")
    @classmethod
    def _parse_time(cls, v: Any) -> Any:
        return _parse_if_string(v)

    @field_serializer("departure_time", "arrival_time")
    def _serialize_time(self, value: datetime) -> str:
        return format_timestamp(value)


class RouteDocument(BaseModel):
    connections: list[ConnectionDocument] = Field(default_factory=list)
    transfers: int = Field(ge=0)


class JourneyDocument(BaseModel):
    query: QueryDocument
    routes: list[RouteDocument] = Field(default_factory=list)


def journey_to_document(journey: Journey) -> dict[str, Any]:
    """Convert a Journey into a JSON-ready dictionary."""
    document = JourneyDocument(
        query=QueryDocument(
            departure_stop=journey.query.departure_stop,
            arrival_stop=journey.query.arrival_stop,
            query_time=journey.query.query_time,
            user_agent=journey.query.user_agent,
            query_type=journey.query.query_type,
        ),
        routes=[
            RouteDocument(
                connections=[
                    ConnectionDocument(
                        departure_time=connection.departure_time,
                        arrival_time=connection.arrival_time,
                        departure_stop=connection.departure_stop,
                        arrival_stop=connection.arrival_stop,
                        vehicle=connection.vehicle,
                    )
                    for connection in route.connections
                ],
                transfers=route.transfers,
            )
            for route in journey.routes
        ],
    )
    return document.model_dump(by_alias=True)


def journey_from_document(data: dict[str, Any]) -> Journey:
    """Rebuild a Journey from a dictionary written by journey_to_document."""
    document = JourneyDocument.model_validate(data)
    return Journey(
        query=Query(
            departure_stop=document.query.departure_stop,
            arrival_stop=document.query.arrival_stop,
            query_time=document.query.query_time,
            user_agent=document.query.user_agent,
            query_type=document.query.query_type,
        ),
        routes=[
            Route(
                connections=[
                    Connection(
                        departure_time=connection.departure_time,
                        arrival_time=connection.arrival_time,
                        departure_stop=connection.departure_stop,
                        arrival_stop=connection.arrival_stop,
                        vehicle=connection.vehicle,
                    )
                    for connection in route.connections
                ],
                transfers=route.transfers,
            )
            for route in document.routes
        ],
    )
