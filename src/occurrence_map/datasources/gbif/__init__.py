"""GBIF occurrence data source.

Fetches occurrence records for a single species and normalizes them into
``OccurrenceRecord`` models.

Public API:
  - client: OccurrenceQueryResult, search_occurrences
  - normalize: normalize_records, normalize_record, resolve_image_url,
    parse_event_date, gbif_occurrence_url, coalesce
"""

from occurrence_map.datasources.gbif.client import (
    OCCURRENCE_PAGE,
    OccurrenceQueryResult,
    search_occurrences,
)
from occurrence_map.datasources.gbif.normalize import (
    coalesce,
    gbif_occurrence_url,
    normalize_record,
    normalize_records,
    parse_event_date,
    resolve_image_url,
)

__all__ = [
    "OCCURRENCE_PAGE",
    "OccurrenceQueryResult",
    "coalesce",
    "gbif_occurrence_url",
    "normalize_record",
    "normalize_records",
    "parse_event_date",
    "resolve_image_url",
    "search_occurrences",
]
