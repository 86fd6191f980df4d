"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: schema models (OccurrenceRecord, SyntheticPoint) or dataclasses
  - Output: str (HTML) or a MapArtifact that renders to one
  - No I/O except ``occurrence_map.save_map``, which writes the final file

Used by flows/pipeline.py which orchestrates the rendering pipeline.

Public API:
  - popups: marker_color, format_altitude, format_date, build_popup_html
  - occurrence_map: MapArtifact, MapLayer, MapMarker, LayerStyle,
    build_occurrence_map, save_map
  - records_table: build_records_table_html

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function::

       from occurrence_map.renderers import render_template

       def build_mywidget_html(records: list[OccurrenceRecord]) -> str:
           rows = [...]
           return render_template("mywidget.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.

3. Wire into ``flows/pipeline.py`` and add tests that call the build
   function with sample records and assert on the returned HTML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
