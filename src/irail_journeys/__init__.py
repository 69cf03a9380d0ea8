"""Reconstruct vehicle-level journeys from iRail API query logs."""

__version__ = "0.1.0"
