"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request functions
    └── {feature}.py      # Transformations on top of the client

Sources:
  - gbif/        Occurrence search (pygbif) and record normalization
  - elevation/   Batch ground-elevation lookup (Open-Meteo) and enrichment
  - synthetic.py Random demonstration points for overlay layers

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``elevation/`` for a minimal example.

2. Write fetch functions that return dicts, dataclasses or schema models::

       from occurrence_map.services.http import session

       def fetch_something(points) -> list[float | None]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()[...]

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/pipeline.py``) with a ``@task``.

5. Add tests in ``tests/test_{name}.py``.
"""
