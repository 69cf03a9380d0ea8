"""Output sink writing one JSON file per journey."""

import json
import logging
from pathlib import Path

from irail_journeys.adapters.output.journey_serializer import journey_to_document
from irail_journeys.domain.models import Journey

logger = logging.getLogger(__name__)


class JsonFileJourneySink:
    """Writes journeys as journey-00000001.json, journey-00000002.json, ...

    The sink owns the journey counter; numbering restarts with each instance.
    """

    def __init__(self, output_dir: Path, start_index: int = 0) -> None:
        self._output_dir = Path(output_dir)
        self._count = start_index

    @property
    def count(self) -> int:
        """Number of the last journey written."""
        return self._count

    def write(self, journey: Journey) -> Path:
        """Serialize a journey to its own file and return the file path."""
        self._output_dir.mkdir(parents=True, exist_ok=True)
        next_index = self._count + 1
        path = self._output_dir / f"journey-{next_index:08d}.json"
        tmp_path = path.with_suffix(".json.tmp")

        document = journey_to_document(journey)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        tmp_path.replace(path)

        self._count = next_index
        return path
