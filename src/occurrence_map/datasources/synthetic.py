"""Random demonstration points for overlay layers.

Stands in for "your own data" when showing how a second dataset can be
drawn on top of the GBIF occurrences.
"""

from __future__ import annotations

import numpy as np

from occurrence_map.schemas import SyntheticPoint

#: Rough bounds of California (min_lon, max_lon, min_lat, max_lat).
CALIFORNIA_BBOX = {
    "min_lon": -124.4,
    "max_lon": -114.1,
    "min_lat": 32.5,
    "max_lat": 42.0,
}

DEFAULT_POINT_COUNT = 30
DEFAULT_SEED = 123


def generate_synthetic_points(
    n: int = DEFAULT_POINT_COUNT,
    bbox: dict[str, float] | None = None,
    seed: int | None = DEFAULT_SEED,
) -> list[SyntheticPoint]:
    """
    Draw ``n`` points uniformly at random inside a bounding box.

    Args:
        n: Number of points.
        bbox: Dict with ``min_lon``, ``max_lon``, ``min_lat``, ``max_lat``.
            Defaults to California.
        seed: RNG seed; the same seed always gives the same points.

    Returns:
        SyntheticPoint list with placeholder descriptive fields.
    """
    if n < 0:
        msg = f"n must be non-negative, got {n}"
        raise ValueError(msg)
    bbox = bbox or CALIFORNIA_BBOX

    rng = np.random.default_rng(seed)
    lons = rng.uniform(bbox["min_lon"], bbox["max_lon"], size=n)
    lats = rng.uniform(bbox["min_lat"], bbox["max_lat"], size=n)

    return [
        SyntheticPoint(longitude=float(lon), latitude=float(lat))
        for lon, lat in zip(lons, lats, strict=True)
    ]
