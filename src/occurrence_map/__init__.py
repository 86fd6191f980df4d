"""GBIF Occurrence Map - species occurrences on an interactive elevation-aware map.

Architecture::

    datasources/   External data (GBIF via pygbif, Open-Meteo elevation, synthetic overlay)
    renderers/     Pure data → HTML (map, popups, record table)
    flows/         Prefect orchestration (fetch → normalize → enrich → render → write)
    services/      Shared utilities (HTTP session)

Data flow: gbif.client → gbif.normalize → elevation.enrich → renderers → HTML file

The pipeline is strictly one-way; no stage feeds back into an earlier one.
"""

__version__ = "0.1.0"

from occurrence_map.config import Settings
from occurrence_map.schemas import GeoPoint, OccurrenceRecord, SyntheticPoint

__all__ = ["GeoPoint", "OccurrenceRecord", "Settings", "SyntheticPoint", "__version__"]
