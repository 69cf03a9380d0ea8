"""Journey domain model."""

from dataclasses import dataclass, field

from irail_journeys.domain.models.query import Query
from irail_journeys.domain.models.route import Route


@dataclass(frozen=True)
class Journey:
    """All reconstructed routes for one logged query. The unit of output."""

    query: Query
    routes: list[Route] = field(default_factory=list)
