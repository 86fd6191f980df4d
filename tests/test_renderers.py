"""
Tests for renderer modules: popups, the Leaflet map and the records table.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock, patch

import pytest
import requests

from occurrence_map.datasources.synthetic import generate_synthetic_points
from occurrence_map.renderers import occurrence_map as map_renderer
from occurrence_map.renderers.occurrence_map import (
    LEAFLET_CSS_URL,
    LEAFLET_JS_URL,
    build_occurrence_map,
    save_map,
)
from occurrence_map.renderers.popups import (
    build_popup_html,
    format_altitude,
    format_date,
    marker_color,
)
from occurrence_map.renderers.records_table import build_records_table_html
from occurrence_map.schemas import OccurrenceRecord, SyntheticPoint

if TYPE_CHECKING:
    from pathlib import Path


def make_record(**overrides: Any) -> OccurrenceRecord:
    fields: dict[str, Any] = {
        "number": 1,
        "id": 1001,
        "scientific_name": "Euphydryas editha",
        "latitude": 37.87,
        "longitude": -119.53,
        "event_date": date(2021, 5, 14),
        "institution_code": "CAS",
        "gbif_link": "https://www.gbif.org/occurrence/1001",
        "image": "https://example.org/p.jpg",
        "altitude": 1234.5678,
    }
    fields.update(overrides)
    return OccurrenceRecord(**fields)


# =============================================================================
# Popups
# =============================================================================


class TestMarkerColor:
    """Test fill colour by source type."""

    @pytest.mark.parametrize(
        ("source_type", "color"),
        [("GBIF", "red"), ("test", "yellow"), ("museum", "blue"), ("", "blue")],
    )
    def test_marker_color(self, source_type: str, color: str) -> None:
        assert marker_color(source_type) == color


class TestFormatAltitude:
    """Test altitude display."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1234.5678, "1234.57 m"),
            (100.0, "100.0 m"),
            (-3.456, "-3.46 m"),
            (None, "Unknown"),
            ("test", "test"),
        ],
    )
    def test_format_altitude(self, value: float | str | None, expected: str) -> None:
        assert format_altitude(value) == expected


class TestFormatDate:
    def test_date(self) -> None:
        assert format_date(date(2021, 5, 14)) == "2021-05-14"

    def test_none(self) -> None:
        assert format_date(None) == "Unknown"

    def test_placeholder(self) -> None:
        assert format_date("test") == "test"


class TestBuildPopupHtml:
    """Test popup HTML construction."""

    def test_full_popup(self) -> None:
        html = build_popup_html(make_record())
        assert html == (
            "<b>Scientific Name:</b> Euphydryas editha"
            "<br><b>Altitude:</b> 1234.57 m"
            "<br><b>InstitutionCode:</b> CAS"
            "<br><b>Date:</b> 2021-05-14"
            "<br><b>Source:</b> GBIF"
            '<br><a href="https://www.gbif.org/occurrence/1001" target="_blank">View on GBIF</a>'
            '<br><img src="https://example.org/p.jpg" width="150" height="150">'
        )

    def test_idempotent(self) -> None:
        record = make_record()
        assert build_popup_html(record) == build_popup_html(record)

    def test_no_image_no_img_tag(self) -> None:
        html = build_popup_html(make_record(image=None))
        assert "<img" not in html
        assert "View on GBIF" in html

    def test_show_image_false_hides_thumbnail(self) -> None:
        html = build_popup_html(make_record(), show_image=False)
        assert "<img" not in html

    def test_non_gbif_has_no_link(self) -> None:
        html = build_popup_html(make_record(source_type="museum"))
        assert "View on GBIF" not in html
        assert "<a " not in html
        assert "<b>Source:</b> museum" in html

    def test_missing_optional_fields(self) -> None:
        html = build_popup_html(make_record(altitude=None, event_date=None, image=None))
        assert "<b>Altitude:</b> Unknown" in html
        assert "<b>Date:</b> Unknown" in html

    def test_values_are_escaped(self) -> None:
        html = build_popup_html(make_record(scientific_name="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_synthetic_point(self) -> None:
        point = SyntheticPoint(latitude=35.0, longitude=-120.0)
        html = build_popup_html(point)
        assert "<b>Altitude:</b> test<br>" in html
        assert "<b>Date:</b> test" in html
        assert "<b>Source:</b> test" in html
        assert "View on GBIF" not in html
        assert "<img" not in html


# =============================================================================
# Map
# =============================================================================


class TestBuildOccurrenceMap:
    """Test map artifact composition."""

    def test_one_marker_per_record(self) -> None:
        records = [make_record(id=1), make_record(id=2, latitude=36.0)]
        artifact = build_occurrence_map(records)

        assert len(artifact.layers) == 1
        assert artifact.marker_count == 2
        assert [m.lat for m in artifact.layers[0].markers] == [37.87, 36.0]

    def test_occurrence_layer_style(self) -> None:
        artifact = build_occurrence_map([make_record()])
        layer = artifact.layers[0]

        assert layer.name == "GBIF"
        assert layer.style.radius == 4
        assert layer.style.fill_opacity == 0.7
        assert layer.style.stroke is False
        assert layer.markers[0].color == "red"

    def test_overlay_layer(self) -> None:
        overlay = generate_synthetic_points(3)
        artifact = build_occurrence_map([make_record()], overlay)

        assert len(artifact.layers) == 2
        assert artifact.marker_count == 4
        over = artifact.layers[1]
        assert over.name == "Overlay"
        assert over.style.radius == 6
        assert over.style.fill_opacity == 0.8
        assert {m.color for m in over.markers} == {"yellow"}
        assert all("View on GBIF" not in m.popup for m in over.markers)

    def test_empty_overlay_adds_no_layer(self) -> None:
        artifact = build_occurrence_map([make_record()], [])
        assert len(artifact.layers) == 1

    def test_show_images_false(self) -> None:
        artifact = build_occurrence_map([make_record()], show_images=False)
        assert "<img" not in artifact.layers[0].markers[0].popup

    def test_empty_records(self) -> None:
        artifact = build_occurrence_map([])
        assert artifact.marker_count == 0
        assert "setView" in artifact.to_html()

    def test_to_html_links_cdn_without_assets(self) -> None:
        html = build_occurrence_map([make_record()], title="Editha map").to_html()

        assert "<title>Editha map</title>" in html
        assert f'<link rel="stylesheet" href="{LEAFLET_CSS_URL}">' in html
        assert f'<script src="{LEAFLET_JS_URL}"></script>' in html
        assert "L.circleMarker" in html
        assert html.count('"popup":') == 1

    def test_to_html_inlines_assets(self) -> None:
        html = build_occurrence_map([make_record()]).to_html(
            {"css": ".leaflet-test{color:red}", "js": "var LEAFLET_TEST = 1;"}
        )

        assert "<style>.leaflet-test{color:red}</style>" in html
        assert "<script>var LEAFLET_TEST = 1;</script>" in html
        assert LEAFLET_JS_URL not in html

    def test_popup_markup_not_breaking_script(self) -> None:
        html = build_occurrence_map([make_record(scientific_name="a</script>b")]).to_html()
        assert "a</script>b" not in html


class TestSaveMap:
    """Test writing the map file."""

    def test_writes_cdn_version(self, tmp_path: Path) -> None:
        artifact = build_occurrence_map([make_record()])
        out = save_map(artifact, tmp_path / "nested" / "map.html", selfcontained=False)

        assert out == tmp_path / "nested" / "map.html"
        assert out.exists()
        assert "L.circleMarker" in out.read_text(encoding="utf-8")

    @patch("occurrence_map.renderers.occurrence_map.fetch_leaflet_assets")
    def test_selfcontained_inlines(self, mock_assets: Mock, tmp_path: Path) -> None:
        mock_assets.return_value = {"css": "/* leaflet css */", "js": "/* leaflet js */"}
        out = save_map(build_occurrence_map([make_record()]), tmp_path / "map.html")

        text = out.read_text(encoding="utf-8")
        assert "/* leaflet css */" in text
        assert "/* leaflet js */" in text
        mock_assets.assert_called_once()

    @patch("occurrence_map.renderers.occurrence_map.fetch_leaflet_assets")
    def test_asset_failure_writes_nothing(self, mock_assets: Mock, tmp_path: Path) -> None:
        mock_assets.side_effect = requests.ConnectionError("cdn down")
        out = tmp_path / "map.html"

        with pytest.raises(requests.ConnectionError):
            save_map(build_occurrence_map([make_record()]), out)
        assert not out.exists()


class TestFetchLeafletAssets:
    """Test asset download for inlining."""

    @patch("occurrence_map.renderers.occurrence_map.session.get")
    def test_downloads_css_and_js(self, mock_get: Mock) -> None:
        def fake_get(url: str) -> Mock:
            resp = Mock()
            resp.raise_for_status = Mock()
            resp.text = f"content of {url}"
            return resp

        mock_get.side_effect = fake_get

        assets = map_renderer.fetch_leaflet_assets()

        assert assets == {
            "css": f"content of {LEAFLET_CSS_URL}",
            "js": f"content of {LEAFLET_JS_URL}",
        }


# =============================================================================
# Records table
# =============================================================================


class TestBuildRecordsTableHtml:
    """Test the records preview table."""

    def test_empty(self) -> None:
        assert "No occurrence records" in build_records_table_html([])

    def test_limits_rows(self) -> None:
        records = [make_record(number=i, id=i) for i in range(1, 16)]
        html = build_records_table_html(records, limit=10)

        assert html.count("<tr>") == 11  # header + 10 rows
        assert "Showing 10 of 15 records" in html

    def test_row_content(self) -> None:
        html = build_records_table_html([make_record()])

        assert "<th>Scientific Name</th>" in html
        assert "<td>Euphydryas editha</td>" in html
        assert "<td>1234.57 m</td>" in html
        assert "<td>2021-05-14</td>" in html
        assert 'href="https://www.gbif.org/occurrence/1001"' in html
        assert '<img src="https://example.org/p.jpg"' in html

    def test_no_image_cell_empty(self) -> None:
        html = build_records_table_html([make_record(image=None)])
        assert "<img" not in html
