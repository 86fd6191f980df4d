"""Batch ground-elevation lookup from the Open-Meteo Elevation API.

API docs: https://open-meteo.com/en/docs/elevation-api
Backed by the Copernicus 90 m DEM. Free, no API key.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from occurrence_map.schemas import WGS84
from occurrence_map.services.http import session

if TYPE_CHECKING:
    from collections.abc import Sequence

    from occurrence_map.schemas import GeoPoint

ELEVATION_API = "https://api.open-meteo.com/v1/elevation"
MAX_POINTS_PER_REQUEST = 100  # API maximum coordinates per call


class ElevationLookupError(RuntimeError):
    """The elevation service returned a response that can't be aligned with the request."""


def _to_metres(value: Any) -> float | None:
    """Convert one API value to float metres; null or non-finite becomes None."""
    if value is None:
        return None
    metres = float(value)
    return metres if math.isfinite(metres) else None


def _fetch_chunk(points: Sequence[GeoPoint]) -> list[float | None]:
    """GET elevations for at most ``MAX_POINTS_PER_REQUEST`` points."""
    params = {
        "latitude": ",".join(f"{p.lat:.6f}" for p in points),
        "longitude": ",".join(f"{p.lon:.6f}" for p in points),
    }
    resp = session.get(ELEVATION_API, params=params)
    resp.raise_for_status()
    data: dict[str, Any] = resp.json()

    values = data.get("elevation")
    if not isinstance(values, list) or len(values) != len(points):
        got = len(values) if isinstance(values, list) else "no"
        msg = f"Expected {len(points)} elevation values, got {got}"
        raise ElevationLookupError(msg)
    return [_to_metres(v) for v in values]


def fetch_elevations(points: Sequence[GeoPoint]) -> list[float | None]:
    """
    Look up ground elevation (metres) for each point.

    Points are sent in order, in chunks of ``MAX_POINTS_PER_REQUEST``, and the
    results concatenated, so ``result[i]`` always belongs to ``points[i]``.
    A point the service has no value for comes back as None.

    Args:
        points: WGS84 points.

    Returns:
        One elevation per input point, same order.

    Raises:
        ValueError: If any point is not in EPSG:4326.
        ElevationLookupError: If a response doesn't match its request size.
        requests.HTTPError: If a request fails.
    """
    for p in points:
        if p.crs != WGS84:
            msg = f"Elevation lookup requires {WGS84} points, got {p.crs}"
            raise ValueError(msg)

    elevations: list[float | None] = []
    for start in range(0, len(points), MAX_POINTS_PER_REQUEST):
        elevations.extend(_fetch_chunk(points[start : start + MAX_POINTS_PER_REQUEST]))
    return elevations
