"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

API_V1_PREFIX: str = "/api"

# Module-specific prefixes
PARKING_LOTS_PREFIX: str = f"{API_V1_PREFIX}/parking-lots"
PARKING_RECORDS_PREFIX: str = f"{API_V1_PREFIX}/parking-records"
CARS_PREFIX: str = f"{API_V1_PREFIX}/cars"
INTEGRATED_PREFIX: str = f"{API_V1_PREFIX}/integrated"

__all__ = [
    "API_V1_PREFIX",
    "PARKING_LOTS_PREFIX",
    "PARKING_RECORDS_PREFIX",
    "CARS_PREFIX",
    "INTEGRATED_PREFIX",
]
