"""Occurrence records HTML table renderer.

Builds a striped preview table of the first few normalized records, with
links to gbif.org and photo thumbnails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from occurrence_map.renderers import render_template
from occurrence_map.renderers.popups import format_altitude, format_date

if TYPE_CHECKING:
    from collections.abc import Sequence

    from occurrence_map.schemas import OccurrenceRecord

COLUMNS = [
    "Number",
    "ID",
    "Scientific Name",
    "Latitude",
    "Longitude",
    "Country",
    "State/Province",
    "Date",
    "Record Type",
    "Source",
    "Institution",
    "Observer",
    "Sex",
    "Life Stage",
    "Altitude",
    "Source Type",
    "GBIF",
    "Image",
]


def _row(record: OccurrenceRecord) -> dict[str, Any]:
    return {
        "cells": [
            record.number,
            record.id,
            record.scientific_name,
            f"{record.latitude:.5f}",
            f"{record.longitude:.5f}",
            record.country,
            record.state_province,
            format_date(record.event_date),
            record.record_type,
            record.source,
            record.institution_code,
            record.observer,
            record.sex,
            record.life_stage,
            format_altitude(record.altitude),
            record.source_type,
        ],
        "gbif_link": record.gbif_link,
        "image": record.image,
    }


def build_records_table_html(records: Sequence[OccurrenceRecord], limit: int = 10) -> str:
    """Build an HTML table of the first ``limit`` records."""
    if not records:
        return "<p>No occurrence records available.</p>"

    shown = list(records)[:limit]
    return render_template(
        "records_table.html.j2",
        columns=COLUMNS,
        rows=[_row(r) for r in shown],
        total=len(records),
    )
