"""Leaflet map renderer for occurrence records.

Builds a ``MapArtifact`` with one circle-marker layer per point collection
(GBIF occurrences, optional synthetic overlay) and serializes it to a single
standalone HTML file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING

from occurrence_map.renderers import render_template
from occurrence_map.renderers.popups import build_popup_html, marker_color
from occurrence_map.services.http import session

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from occurrence_map.schemas import OccurrenceRecord, SyntheticPoint

LEAFLET_VERSION = "1.9.4"
LEAFLET_CSS_URL = f"https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.css"
LEAFLET_JS_URL = f"https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.js"

OSM_TILES = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = "&copy; OpenStreetMap contributors"


# =============================================================================
# Data Model
# =============================================================================


@dataclass
class LayerStyle:
    """Marker styling shared by every marker in a layer."""

    radius: int = 4
    fill_opacity: float = 0.7
    stroke: bool = False


OCCURRENCE_STYLE = LayerStyle(radius=4, fill_opacity=0.7)
OVERLAY_STYLE = LayerStyle(radius=6, fill_opacity=0.8)


@dataclass
class MapMarker:
    """One circle marker with its popup body."""

    lat: float
    lon: float
    color: str
    popup: str


@dataclass
class MapLayer:
    """A named group of markers drawn with one style."""

    name: str
    style: LayerStyle
    markers: list[MapMarker] = field(default_factory=list)


@dataclass
class MapArtifact:
    """An interactive map ready to be written to disk."""

    title: str
    layers: list[MapLayer] = field(default_factory=list)
    tiles: str = OSM_TILES
    attribution: str = OSM_ATTRIBUTION

    @property
    def marker_count(self) -> int:
        return sum(len(layer.markers) for layer in self.layers)

    def to_html(self, assets: dict[str, str] | None = None) -> str:
        """Render the full HTML page.

        Args:
            assets: Leaflet ``css`` and ``js`` source to inline. When None,
                the page links to the CDN instead.
        """
        assets = assets or {}
        return render_template(
            "occurrence_map.html.j2",
            title=self.title,
            tiles=self.tiles,
            attribution=self.attribution,
            layers=[asdict(layer) for layer in self.layers],
            leaflet_css=assets.get("css"),
            leaflet_js=assets.get("js"),
            leaflet_css_url=LEAFLET_CSS_URL,
            leaflet_js_url=LEAFLET_JS_URL,
        )


# =============================================================================
# Building
# =============================================================================


def _build_layer(
    name: str,
    points: Sequence[OccurrenceRecord | SyntheticPoint],
    style: LayerStyle,
    *,
    show_images: bool,
) -> MapLayer:
    markers = [
        MapMarker(
            lat=p.latitude,
            lon=p.longitude,
            color=marker_color(p.source_type),
            popup=build_popup_html(p, show_image=show_images),
        )
        for p in points
    ]
    return MapLayer(name=name, style=style, markers=markers)


def build_occurrence_map(
    records: Sequence[OccurrenceRecord],
    overlay: Sequence[SyntheticPoint] | None = None,
    *,
    show_images: bool = True,
    title: str = "GBIF occurrences",
) -> MapArtifact:
    """Build an interactive map of occurrence records.

    Args:
        records: Enriched GBIF records, one marker each.
        overlay: Optional synthetic points drawn as a second layer.
        show_images: Embed photo thumbnails in popups when available.
        title: Page title.

    Returns:
        MapArtifact with the occurrence layer first, overlay second.
    """
    layers = [_build_layer("GBIF", records, OCCURRENCE_STYLE, show_images=show_images)]
    if overlay:
        layers.append(_build_layer("Overlay", overlay, OVERLAY_STYLE, show_images=show_images))
    return MapArtifact(title=title, layers=layers)


# =============================================================================
# Output
# =============================================================================


def fetch_leaflet_assets() -> dict[str, str]:
    """Download the Leaflet stylesheet and script for inlining."""
    assets: dict[str, str] = {}
    for kind, url in (("css", LEAFLET_CSS_URL), ("js", LEAFLET_JS_URL)):
        resp = session.get(url)
        resp.raise_for_status()
        assets[kind] = resp.text
    return assets


def save_map(artifact: MapArtifact, path: Path, *, selfcontained: bool = True) -> Path:
    """Write the map to a single HTML file.

    With ``selfcontained`` the Leaflet assets are inlined so the file works
    without a CDN (map tiles are still loaded from the tile server). The
    page is rendered completely before the file is opened.
    """
    assets = fetch_leaflet_assets() if selfcontained else None
    html = artifact.to_html(assets)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(html)
    return path
