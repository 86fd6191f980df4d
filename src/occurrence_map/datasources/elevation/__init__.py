"""Ground elevation data source (Open-Meteo Elevation API).

Public API:
  - client: fetch_elevations, ElevationLookupError, ELEVATION_API
  - enrich: to_geo_points, enrich_with_elevation
"""

from occurrence_map.datasources.elevation.client import (
    ELEVATION_API,
    MAX_POINTS_PER_REQUEST,
    ElevationLookupError,
    fetch_elevations,
)
from occurrence_map.datasources.elevation.enrich import enrich_with_elevation, to_geo_points

__all__ = [
    "ELEVATION_API",
    "MAX_POINTS_PER_REQUEST",
    "ElevationLookupError",
    "enrich_with_elevation",
    "fetch_elevations",
    "to_geo_points",
]
