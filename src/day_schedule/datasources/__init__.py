"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # Endpoint access through the shared HTTP session
    └── models.py         # Record keys, parsing helpers, provider protocol

The compute core only ever sees the keyed records a source returns; it never
imports a client module directly. Anything callable as
``provider(context, params) -> dict`` can stand in for a client, which is how
the tests feed synthetic data.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.

2. Fetch through the shared session so retries and timeouts apply::

       from day_schedule.services.http import session

       resp = session.get(API_URL, params={...})
       resp.raise_for_status()
       return resp.json()

3. Re-export the public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
