"""Route domain model."""

from dataclasses import dataclass, field

from irail_journeys.domain.models.connection import Connection


@dataclass(frozen=True)
class Route:
    """Reconstructed travel path for one journey option."""

    connections: list[Connection] = field(default_factory=list)
    transfers: int = 0

    def __post_init__(self) -> None:
        if self.transfers < 0:
            raise ValueError(f"transfers must be non-negative, got {self.transfers}")

    @property
    def departure_stop(self) -> str | None:
        """Departure stop of the first connection, if any."""
        return self.connections[0].departure_stop if self.connections else None

    @property
    def arrival_stop(self) -> str | None:
        """Arrival stop of the last connection, if any."""
        return self.connections[-1].arrival_stop if self.connections else None
