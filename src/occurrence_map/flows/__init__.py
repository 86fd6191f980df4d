"""
Prefect flows for the occurrence map pipeline.

Flows:
- pipeline: fetch GBIF occurrences, normalize, enrich with elevation,
  render the Leaflet map and write it to disk

Usage (local):
    python -m occurrence_map.flows.pipeline
    gbif-occurrence-map run "Euphydryas editha" --limit 50

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m occurrence_map.flows.pipeline
"""
