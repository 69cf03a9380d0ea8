"""Query domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Query:
    """A user's original routing request, as recorded in a log line."""

    departure_stop: str
    arrival_stop: str
    query_time: datetime
    user_agent: str
    query_type: str
