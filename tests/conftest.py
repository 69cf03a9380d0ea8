"""Shared fixtures."""

from datetime import UTC, datetime

import pytest

from irail_journeys.domain.models import Query


@pytest.fixture
def query() -> Query:
    """A connections query from Brussels-South to Ghent-Sint-Pieters."""
    return Query(
        departure_stop="http://irail.be/stations/NMBS/008814001",
        arrival_stop="http://irail.be/stations/NMBS/008892007",
        query_time=datetime(2019, 11, 19, 6, 55, 12, tzinfo=UTC),
        user_agent="iRail-test/1.0",
        query_type="connections",
    )
