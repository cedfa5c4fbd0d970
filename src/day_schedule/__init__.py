"""Day Schedule - seasonal hours, seasons and a daily event timeline.

Architecture::

    datecontext.py   Calendar/clock breakdown of an instant and its +/-2 day window
    datasources/     Astronomy provider boundary (keyed records, HTTP client)
    analysis/        Pure classifiers (seasonal hours, seasons, phenology, timeline)
    reference/       Fixed tables (phase names, season ranges, regions)
    compute.py       Two-phase driver producing one ScheduleRecord per day
    flows/           Prefect orchestration for a configured observer
    services/        Shared HTTP session with retry

Data flow: date context -> astronomy records -> classification -> neighbor
linking -> published anchor-day record.
"""

__version__ = "0.1.0"

from day_schedule.config import Settings  # noqa: E402
from day_schedule.schemas import EventKind, ScheduleConfig  # noqa: E402

__all__ = ["EventKind", "ScheduleConfig", "Settings", "__version__"]
