"""Marker colours and popup HTML for map points.

Shared by every map layer: GBIF occurrences and synthetic overlays are
both rendered through ``build_popup_html``.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from occurrence_map.renderers import render_template
from occurrence_map.schemas import GBIF_SOURCE, SYNTHETIC_PLACEHOLDER, UNKNOWN

if TYPE_CHECKING:
    from occurrence_map.schemas import OccurrenceRecord, SyntheticPoint

COLOR_BY_SOURCE = {
    GBIF_SOURCE: "red",
    SYNTHETIC_PLACEHOLDER: "yellow",
}
DEFAULT_COLOR = "blue"


def marker_color(source_type: str) -> str:
    """Fill colour for a marker, by source-type tag."""
    return COLOR_BY_SOURCE.get(source_type, DEFAULT_COLOR)


def format_altitude(value: float | str | None) -> str:
    """Altitude for display: metres to 2 dp, placeholders as-is, None as Unknown."""
    if value is None:
        return UNKNOWN
    if isinstance(value, str):
        return value
    return f"{round(value, 2)} m"


def format_date(value: date | str | None) -> str:
    if value is None:
        return UNKNOWN
    if isinstance(value, date):
        return value.isoformat()
    return value


def build_popup_html(point: OccurrenceRecord | SyntheticPoint, *, show_image: bool = True) -> str:
    """Build the popup body for one map point.

    The "View on GBIF" link appears only for GBIF-tagged points and the
    thumbnail only when the point has an image and ``show_image`` is set.
    Missing optional fields render as empty fragments.
    """
    is_gbif = point.source_type == GBIF_SOURCE
    return render_template(
        "popup.html.j2",
        name=point.scientific_name,
        altitude=format_altitude(point.altitude),
        institution=point.institution_code,
        date=format_date(point.event_date),
        source=point.source_type,
        link=point.gbif_link if is_gbif else None,
        image=point.image if show_image else None,
    )
