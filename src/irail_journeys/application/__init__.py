"""Application services (use cases) for journey reconstruction."""

from irail_journeys.application.journey_pipeline import JourneyPipeline, PipelineReport
from irail_journeys.application.journey_reconstructor import (
    BoardingState,
    JourneyReconstructor,
    LegScanner,
)

__all__ = [
    "BoardingState",
    "JourneyPipeline",
    "JourneyReconstructor",
    "LegScanner",
    "PipelineReport",
]
