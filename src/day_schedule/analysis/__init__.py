"""Day classification logic.

Pure functions over an astronomy record and a date context. This is the
domain logic layer: no I/O, no HTTP, no Prefect decorators.

Dependency rule: analysis/ imports datasource *models* and reference/ tables
only. It never calls a provider.

Modules:
  - conversions: compass points, roman numerals, distances, HH:MM:SS
  - seasonal_hours: seasonal-hour partition and named daytime phases
  - seasons: meteorological season by month and hemisphere
  - phenology: phenological season estimate for Europe
  - timeline: event buckets and nearest past/future lookup
  - change_markers: transitions between neighboring days

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function taking the day's
   ``AstronomyRecord``/``DateContext`` (and the config values it needs).
2. Call it from ``compute.classify_day`` and store the result on
   ``ScheduleRecord``.
3. Expose it in ``serialization.schedule_record_to_dict``.
4. Add tests in ``tests/test_{name}.py``.
"""
