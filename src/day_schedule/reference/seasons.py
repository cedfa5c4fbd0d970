"""Season tables.

Meteorological seasons are whole-month ranges; the southern hemisphere uses
the same ranges with the names shifted by half a year. Phenological seasons
follow the spread of early spring and early fall across Europe, starting at
two fixed anchor locations and advancing at fixed rates (km/day).
"""

from __future__ import annotations

from dataclasses import dataclass

# Northern hemisphere order; index is the season number
SEASONS_NORTH: tuple[str, ...] = ("Spring", "Summer", "Fall", "Winter")
SEASONS_SOUTH: tuple[str, ...] = ("Fall", "Winter", "Spring", "Summer")

# (first month, last month) per northern season; winter wraps the year end
METEO_MONTH_RANGES: tuple[tuple[int, int], ...] = (
    (3, 5),
    (6, 8),
    (9, 11),
    (12, 2),
)

PHENOLOGICAL_SEASONS: tuple[str, ...] = (
    "Winter",
    "Early spring",
    "First spring",
    "Full spring",
    "Early summer",
    "Midsummer",
    "Late summer",
    "Early fall",
    "Full fall",
    "Late fall",
)

DEFAULT_EARLYSPRING = "02-22"
DEFAULT_EARLYFALL = "08-20"


@dataclass(frozen=True)
class PhenoFront:
    """Where a phenological season starts and how fast it spreads."""

    lat: float
    lon: float
    # km/day; the first rate gates the 40% threshold, the second reaches the observer,
    # the third covers the whole region
    rates: tuple[float, float, float]


# Early spring starts in the south-west (Cape St. Vincent) and moves north-east
EARLYSPRING_FRONT = PhenoFront(lat=37.136633, lon=-8.817837, rates=(37.5, 31.0, 37.5))

# Early fall starts in the north-east (Helsinki) and moves south-west
EARLYFALL_FRONT = PhenoFront(lat=60.161880, lon=24.937267, rates=(35.0, 29.5, 45.0))

# Fraction of the distance that must remain for the first stage
PHENO_EARLY_THRESHOLD = 0.4
