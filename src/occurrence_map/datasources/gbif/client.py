"""GBIF occurrence search via the pygbif client.

API docs: https://techdocs.gbif.org/en/openapi/v1/occurrence
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pygbif import occurrences

from occurrence_map.schemas import RawOccurrence

#: Human-facing detail page for a single occurrence key.
OCCURRENCE_PAGE = "https://www.gbif.org/occurrence"


# =============================================================================
# Data Model
# =============================================================================


@dataclass
class OccurrenceQueryResult:
    """Raw rows from one search plus their media, keyed by occurrence key."""

    rows: list[RawOccurrence] = field(default_factory=list)
    media: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    count: int = 0
    end_of_records: bool = True

    def __len__(self) -> int:
        return len(self.rows)


# =============================================================================
# API Fetching
# =============================================================================


def search_occurrences(scientific_name: str, limit: int = 50) -> OccurrenceQueryResult:
    """
    Search GBIF for georeferenced occurrences of a species.

    Only records with coordinates and without flagged geospatial issues are
    requested. One request, no paging beyond ``limit``.

    Args:
        scientific_name: Species name, e.g. ``"Euphydryas editha"``.
        limit: Maximum number of records to request.

    Returns:
        OccurrenceQueryResult with rows in API order and the media mapping.

    Raises:
        ValueError: If ``limit`` is not positive.
        requests.HTTPError: If the API request fails.
    """
    if limit <= 0:
        msg = f"limit must be positive, got {limit}"
        raise ValueError(msg)

    response: dict[str, Any] = occurrences.search(
        scientificName=scientific_name,
        hasCoordinate=True,
        hasGeospatialIssue=False,
        limit=limit,
    )

    rows: list[RawOccurrence] = response.get("results") or []
    media: dict[str, list[dict[str, Any]]] = {}
    for row in rows:
        key = row.get("key")
        if key is not None:
            media[str(key)] = row.get("media") or []

    return OccurrenceQueryResult(
        rows=rows,
        media=media,
        count=response.get("count", len(rows)),
        end_of_records=response.get("endOfRecords", True),
    )
