"""
Prefect flow: GBIF occurrences → normalized records → elevation → map.

Run locally:
    python -m occurrence_map.flows.pipeline

Run with Prefect dashboard:
    prefect server start &
    python -m occurrence_map.flows.pipeline
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from occurrence_map.datasources import elevation, gbif
from occurrence_map.datasources.synthetic import DEFAULT_SEED, generate_synthetic_points
from occurrence_map.renderers.occurrence_map import MapArtifact, build_occurrence_map, save_map
from occurrence_map.renderers.records_table import build_records_table_html
from occurrence_map.schemas import OccurrenceRecord

DEFAULT_SPECIES = "Euphydryas editha"
DEFAULT_OUTPUT = Path("map.gbif.photos.html")


# =============================================================================
# Pipeline stages
# =============================================================================


@task(name="fetch-occurrences")
def fetch_occurrences(species_name: str, limit: int) -> gbif.OccurrenceQueryResult:
    """Query GBIF for georeferenced occurrences of one species."""
    return gbif.search_occurrences(species_name, limit)


@task(name="normalize-records")
def normalize(result: gbif.OccurrenceQueryResult) -> list[OccurrenceRecord]:
    """Project raw rows onto the record schema, dropping rows without coordinates."""
    return gbif.normalize_records(result)


@task(name="enrich-elevation")
def enrich_elevation(records: list[OccurrenceRecord]) -> list[OccurrenceRecord]:
    """Attach ground elevation to every record in one batch lookup."""
    return elevation.enrich_with_elevation(records)


@task(name="render-map")
def render_map(
    records: list[OccurrenceRecord],
    species_name: str,
    *,
    overlay_points: int = 0,
    seed: int = DEFAULT_SEED,
    show_images: bool = True,
) -> MapArtifact:
    """Compose the occurrence layer and the optional synthetic overlay."""
    overlay = generate_synthetic_points(overlay_points, seed=seed) if overlay_points else None
    return build_occurrence_map(
        records,
        overlay,
        show_images=show_images,
        title=f"{species_name}: GBIF occurrences",
    )


@task(name="write-map")
def write_map(artifact: MapArtifact, output: Path, *, selfcontained: bool = True) -> Path:
    """Serialize the map to a single HTML file."""
    return save_map(artifact, output, selfcontained=selfcontained)


@task(name="render-table")
def render_table(records: list[OccurrenceRecord], limit: int = 10) -> str:
    """Render an HTML preview table of the first records."""
    return build_records_table_html(records, limit=limit)


@task(name="write-table")
def write_table(html: str, output: Path) -> Path:
    """Write a rendered preview table to disk."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        f.write(html)
    return output


# =============================================================================
# Flow
# =============================================================================


@flow(name="occurrence-map", log_prints=True)
def run_pipeline(
    species_name: str = DEFAULT_SPECIES,
    limit: int = 50,
    output: Path = DEFAULT_OUTPUT,
    *,
    show_images: bool = True,
    overlay_points: int = 0,
    seed: int = DEFAULT_SEED,
    table_output: Path | None = None,
    selfcontained: bool = True,
) -> dict[str, Any]:
    """
    Build an occurrence map for one species.

    Stages run strictly in order; any upstream failure (GBIF or elevation
    service) propagates and nothing is written. Both pages are rendered
    before the first write, and a failed table write removes the map.

    Args:
        species_name: Scientific name to query.
        limit: Maximum number of GBIF records.
        output: Destination HTML file for the map.
        show_images: Embed photo thumbnails in popups.
        overlay_points: Number of synthetic overlay points (0 = none).
        seed: RNG seed for the overlay.
        table_output: Optional destination for the records preview table.
        selfcontained: Inline Leaflet assets into the map file.

    Returns:
        Summary dict with counts and the output path.
    """
    print(f"Fetching up to {limit} GBIF occurrences for {species_name!r}...")
    result = fetch_occurrences(species_name, limit)
    print(f"Fetched {len(result)} rows ({result.count} matching records on GBIF)")

    records = normalize(result)
    dropped = len(result) - len(records)
    if dropped:
        print(f"Dropped {dropped} rows without coordinates")
    with_images = sum(1 for r in records if r.image)
    print(f"Normalized {len(records)} records ({with_images} with images)")

    print("Looking up elevations...")
    records = enrich_elevation(records)
    missing = sum(1 for r in records if r.altitude is None)
    if missing:
        print(f"Warning: no elevation available for {missing} records")

    artifact = render_map(
        records,
        species_name,
        overlay_points=overlay_points,
        seed=seed,
        show_images=show_images,
    )

    table_html = render_table(records) if table_output is not None else None

    print("Writing map...")
    output_path = write_map(artifact, output, selfcontained=selfcontained)
    print(f"Map written: {output_path} ({artifact.marker_count} markers)")

    summary: dict[str, Any] = {
        "species": species_name,
        "fetched": len(result),
        "records": len(records),
        "markers": artifact.marker_count,
        "output": str(output_path),
    }

    if table_output is not None and table_html is not None:
        # A run either produces every requested file or none of them.
        try:
            table_path = write_table(table_html, table_output)
        except OSError:
            output_path.unlink(missing_ok=True)
            raise
        print(f"Table written: {table_path}")
        summary["table"] = str(table_path)

    return summary


if __name__ == "__main__":
    summary = run_pipeline()
    print(f"Flow complete: {summary}")
