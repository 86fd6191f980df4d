"""Projection of raw GBIF rows onto ``OccurrenceRecord``."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from occurrence_map.datasources.gbif.client import OCCURRENCE_PAGE
from occurrence_map.schemas import GBIF_SOURCE, UNKNOWN, OccurrenceRecord

if TYPE_CHECKING:
    from datetime import date

    from occurrence_map.datasources.gbif.client import OccurrenceQueryResult
    from occurrence_map.schemas import RawOccurrence

# OccurrenceRecord field → GBIF Darwin Core term, for the "Unknown"-filled fields
_DESCRIPTIVE_FIELDS = {
    "country": "country",
    "state_province": "stateProvince",
    "record_type": "basisOfRecord",
    "source": "datasetName",
    "institution_code": "institutionCode",
    "observer": "recordedBy",
    "sex": "sex",
    "life_stage": "lifeStage",
}


# =============================================================================
# Field helpers
# =============================================================================


def coalesce(*values: Any) -> Any:
    """Return the first value that is not None (None if all are)."""
    for value in values:
        if value is not None:
            return value
    return None


def parse_event_date(value: str | None) -> date | None:
    """Parse a GBIF ``eventDate`` into a calendar date.

    Handles plain dates, timestamps (time of day is dropped) and intervals
    such as ``2019-06-01/2019-06-03`` (the start is used). Returns None for
    missing or unparseable values.
    """
    if not value:
        return None
    start = str(value).split("/", 1)[0].strip()
    for candidate in (start, start[:10]):
        try:
            return datetime.fromisoformat(candidate).date()
        except ValueError:
            continue
    return None


def gbif_occurrence_url(key: int | str) -> str:
    """Build the gbif.org detail page URL for an occurrence key."""
    return f"{OCCURRENCE_PAGE}/{key}"


def resolve_image_url(key: int | str, media: dict[str, list[dict[str, Any]]]) -> str | None:
    """Return the first media identifier for an occurrence, or None.

    Anything other than a non-empty list whose first entry carries an
    ``identifier`` means "no image available".
    """
    entries = media.get(str(key))
    if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
        return None
    identifier = entries[0].get("identifier")
    return str(identifier) if identifier else None


# =============================================================================
# Normalization
# =============================================================================


def normalize_record(
    row: RawOccurrence,
    number: int,
    media: dict[str, list[dict[str, Any]]],
) -> OccurrenceRecord | None:
    """Normalize one raw row. Returns None if the key or a coordinate is missing."""
    key = row.get("key")
    lat = row.get("decimalLatitude")
    lon = row.get("decimalLongitude")
    if key is None or lat is None or lon is None:
        return None

    descriptive = {
        field_name: str(coalesce(row.get(term), UNKNOWN))
        for field_name, term in _DESCRIPTIVE_FIELDS.items()
    }

    return OccurrenceRecord(
        number=number,
        id=key,
        scientific_name=coalesce(row.get("scientificName"), UNKNOWN),
        latitude=lat,
        longitude=lon,
        event_date=parse_event_date(row.get("eventDate")),
        gbif_link=gbif_occurrence_url(key),
        image=resolve_image_url(key, media),
        source_type=GBIF_SOURCE,
        **descriptive,
    )


def normalize_records(result: OccurrenceQueryResult) -> list[OccurrenceRecord]:
    """
    Normalize every row of a query result, dropping rows without a key or
    coordinates.

    Output order matches input order. ``number`` is the 1-based position in
    the raw result, so it stays stable when rows are dropped.
    """
    records: list[OccurrenceRecord] = []
    for i, row in enumerate(result.rows, start=1):
        record = normalize_record(row, i, result.media)
        if record is not None:
            records.append(record)
    return records
