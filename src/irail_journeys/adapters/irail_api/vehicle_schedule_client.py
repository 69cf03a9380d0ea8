"""Vehicle schedule client backed by the iRail vehicle endpoint."""

import contextlib
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from irail_journeys.adapters.api_request_logger import log_api_request
from irail_journeys.adapters.irail_api.constants import DEFAULT_HEADERS, IRAIL_VEHICLE_URL
from irail_journeys.adapters.irail_api.vehicle_parser import VehicleResponseParser
from irail_journeys.domain.errors import MalformedResponse, UpstreamUnavailable
from irail_journeys.domain.models import VehicleSchedule

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from irail_journeys.adapters.api_rate_limiter import ApiRateLimiter


class IrailVehicleScheduleClient:
    """Fetches full vehicle schedules, one request per call.

    No caching and no retry: a failed request surfaces immediately as
    UpstreamUnavailable or MalformedResponse.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = IRAIL_VEHICLE_URL,
        timeout_seconds: float = 10.0,
        rate_limiter: "ApiRateLimiter | None" = None,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: Shared aiohttp session.
            base_url: Vehicle endpoint; the trip id is passed as the `id` parameter.
            timeout_seconds: Total timeout per request.
            rate_limiter: Optional limiter applied before every request.
        """
        self._session = session
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = rate_limiter

    @staticmethod
    def _build_params(trip_id: str) -> dict[str, str]:
        return {"id": trip_id, "format": "json", "lang": "en"}

    async def fetch(self, trip_id: str) -> VehicleSchedule:
        """Fetch the full stop schedule for a trip.

        Raises:
            UpstreamUnavailable: Non-success status, transport error or timeout.
            MalformedResponse: The body is not the expected vehicle JSON.
        """
        params = self._build_params(trip_id)
        limiter = self._rate_limiter or contextlib.nullcontext()

        async with limiter:
            log_api_request("GET", self._base_url, params)
            try:
                async with self._session.get(
                    self._base_url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
                ) as response:
                    data = await self._read_response(trip_id, response)
            except TimeoutError as e:
                raise UpstreamUnavailable(trip_id, "request timed out") from e
            except aiohttp.ClientError as e:
                raise UpstreamUnavailable(trip_id, f"request failed: {e}") from e

        schedule = VehicleResponseParser.parse(trip_id, data)
        logger.debug(
            f"Fetched {schedule.vehicle_designation} with {len(schedule.stops)} stop(s) for {trip_id}"
        )
        return schedule

    async def _read_response(self, trip_id: str, response: "ClientResponse") -> Any:
        """Return the decoded JSON body of a successful response."""
        if not 200 <= response.status < 300:
            response_text = await response.text()
            raise UpstreamUnavailable(
                trip_id,
                f"vehicle API returned status {response.status}: {response_text[:200]}",
                status_code=response.status,
            )

        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise MalformedResponse(trip_id, f"response is not valid JSON: {e}") from e
