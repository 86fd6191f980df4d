"""
Domain models for the occurrence map.

Pydantic models for data flowing between pipeline stages. These define the
canonical schema - the GBIF normalizer maps raw API rows onto them.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

#: Placeholder for descriptive fields missing from the source record.
UNKNOWN = "Unknown"

#: Source-type tag carried by every record that came from GBIF.
GBIF_SOURCE = "GBIF"

#: Placeholder literal used by every descriptive field of a synthetic point.
SYNTHETIC_PLACEHOLDER = "test"

#: WGS84 geographic coordinates.
WGS84 = "EPSG:4326"

RawOccurrence = dict[str, Any]


# =============================================================================
# Geometry
# =============================================================================


class GeoPoint(BaseModel):
    """A (longitude, latitude) pair tagged with its coordinate reference system."""

    model_config = ConfigDict(frozen=True)

    lon: float = Field(..., ge=-180, le=180)
    lat: float = Field(..., ge=-90, le=90)
    crs: str = WGS84


# =============================================================================
# Records
# =============================================================================


class OccurrenceRecord(BaseModel):
    """A single GBIF occurrence, normalized to a fixed schema.

    Latitude and longitude are always present. Descriptive fields hold
    ``"Unknown"`` instead of being absent, so rendering never has to check.
    """

    number: int = Field(..., description="1-based position in the raw result")
    id: int = Field(..., description="GBIF occurrence key")
    scientific_name: str = UNKNOWN
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    country: str = UNKNOWN
    state_province: str = UNKNOWN
    event_date: date | None = None
    record_type: str = UNKNOWN
    source: str = Field(default=UNKNOWN, description="Dataset name")
    institution_code: str = UNKNOWN
    observer: str = UNKNOWN
    sex: str = UNKNOWN
    life_stage: str = UNKNOWN
    gbif_link: str
    image: str | None = None
    source_type: str = GBIF_SOURCE
    altitude: float | None = Field(default=None, description="Ground elevation in metres")

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lon=self.longitude, lat=self.latitude)


class SyntheticPoint(BaseModel):
    """A random demonstration point drawn for an overlay layer.

    Has the same shape as ``OccurrenceRecord`` for rendering, but every
    descriptive field is a placeholder and it never links to GBIF.
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    scientific_name: str = SYNTHETIC_PLACEHOLDER
    altitude: str = SYNTHETIC_PLACEHOLDER
    event_date: str = SYNTHETIC_PLACEHOLDER
    institution_code: str = SYNTHETIC_PLACEHOLDER
    source_type: str = SYNTHETIC_PLACEHOLDER
    gbif_link: None = None
    image: None = None
