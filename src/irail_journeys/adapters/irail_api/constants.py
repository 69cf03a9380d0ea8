"""Constants for the iRail API adapter.

API Documentation: https://docs.irail.be/
Rate limit: 3 requests/second per client (burst 5).
No authentication required.
"""

IRAIL_BASE_URL = "https://api.irail.be"
IRAIL_VEHICLE_URL = f"{IRAIL_BASE_URL}/vehicle/"  # GET /vehicle/?id=...&format=json

# Keeps us safely below 3 requests/second
IRAIL_MIN_DELAY_SECONDS = 0.35

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "irail-journeys/0.1 (log analysis)",
}
