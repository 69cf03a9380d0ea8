"""iRail API adapters."""

from irail_journeys.adapters.irail_api.vehicle_parser import VehicleResponseParser
from irail_journeys.adapters.irail_api.vehicle_schedule_client import IrailVehicleScheduleClient

__all__ = [
    "IrailVehicleScheduleClient",
    "VehicleResponseParser",
]
