"""Attach ground elevation to normalized occurrence records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from occurrence_map.datasources.elevation.client import ElevationLookupError, fetch_elevations

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from occurrence_map.schemas import GeoPoint, OccurrenceRecord


def to_geo_points(records: Sequence[OccurrenceRecord]) -> list[GeoPoint]:
    """Convert records to WGS84 points, one per record, same order."""
    return [record.point for record in records]


def enrich_with_elevation(
    records: list[OccurrenceRecord],
    fetch: Callable[[Sequence[GeoPoint]], list[float | None]] = fetch_elevations,
) -> list[OccurrenceRecord]:
    """
    Set ``altitude`` on every record from a single batch lookup.

    Records carry no join key through the lookup, so the match is purely
    positional: the i-th elevation is written to the i-th record.

    Args:
        records: Normalized records; updated in place.
        fetch: Batch elevation function (defaults to Open-Meteo).

    Returns:
        The same list, for chaining.

    Raises:
        ElevationLookupError: If the lookup returns the wrong number of values.
    """
    if not records:
        return records

    elevations = fetch(to_geo_points(records))
    if len(elevations) != len(records):
        msg = f"Got {len(elevations)} elevations for {len(records)} records"
        raise ElevationLookupError(msg)

    for record, elevation in zip(records, elevations, strict=True):
        record.altitude = elevation
    return records
