"""Journey sink port."""

from pathlib import Path
from typing import Protocol

from irail_journeys.domain.models.journey import Journey


class JourneySink(Protocol):
    """Port for persisting reconstructed journeys."""

    def write(self, journey: Journey) -> Path:
        """Persist one journey and return where it was written."""
        ...
