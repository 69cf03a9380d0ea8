"""Output adapters."""

from irail_journeys.adapters.output.journey_serializer import (
    journey_from_document,
    journey_to_document,
)
from irail_journeys.adapters.output.json_file_sink import JsonFileJourneySink

__all__ = ["JsonFileJourneySink", "journey_from_document", "journey_to_document"]
