"""Log record domain model."""

from dataclasses import dataclass, field

from irail_journeys.domain.models.journey_option import JourneyOption
from irail_journeys.domain.models.query import Query

CONNECTIONS_QUERY_TYPE = "connections"


@dataclass(frozen=True)
class LogRecord:
    """One parsed API log line.

    Only connections queries carry a Query and journey options; other query
    types are kept with their type alone so callers can skip them.
    """

    query_type: str
    query: Query | None = None
    options: list[JourneyOption] = field(default_factory=list)

    @property
    def is_connections_query(self) -> bool:
        """Whether this record should be handed to the journey reconstructor."""
        return self.query_type == CONNECTIONS_QUERY_TYPE and self.query is not None
