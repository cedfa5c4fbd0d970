"""Unit and notation conversions used by the day classifiers.

Pure functions, no I/O.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0

COMPASS_POINTS: dict[int, tuple[str, ...]] = {
    4: ("N", "E", "S", "W"),
    8: ("N", "NE", "E", "SE", "S", "SW", "W", "NW"),
    16: (
        "N",
        "NNE",
        "NE",
        "ENE",
        "E",
        "ESE",
        "SE",
        "SSE",
        "S",
        "SSW",
        "SW",
        "WSW",
        "W",
        "WNW",
        "NW",
        "NNW",
    ),
}

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def azimuth_to_compass(azimuth: float, points: int = 16) -> str:
    """
    Convert an azimuth in degrees (0 = north, clockwise) to a compass label.

    Args:
        azimuth: Azimuth in degrees, any real value (normalized mod 360).
        points: Rose resolution, one of 4, 8 or 16.

    Returns:
        Label such as ``"N"``, ``"SW"`` or ``"ESE"``.
    """
    labels = COMPASS_POINTS.get(points)
    if labels is None:
        raise ValueError(f"Unsupported compass resolution: {points}")
    sector = 360.0 / points
    return labels[int(((azimuth % 360.0) + sector / 2) // sector) % points]


def to_roman(value: int) -> str:
    """Convert a positive integer to roman numerals (empty string for 0)."""
    if value < 0:
        raise ValueError(f"Roman numerals need a non-negative value, got {value}")
    out = []
    for arabic, roman in _ROMAN_NUMERALS:
        count, value = divmod(value, arabic)
        out.append(roman * count)
    return "".join(out)


def roman_clock(hour: int, minute: int, second: int) -> str:
    """
    Render a wall-clock time with roman numerals on a 12-hour face.

    Zero minutes and seconds are left out; when minutes are zero but seconds
    are not, the separator is kept so ``10:00:05`` reads ``X::V``.
    """
    hour12 = hour % 12 or 12
    out = to_roman(hour12)
    if minute:
        out += ":" + to_roman(minute)
    elif second:
        out += ":"
    if second:
        out += ":" + to_roman(second)
    return out


def great_circle_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points on Earth, in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def hours_to_hms(hours: float | None, wrap: bool = True) -> str | None:
    """
    Format decimal hours as ``HH:MM:SS``.

    Clock times (``wrap=True``) of 24 or more wrap to the next day; durations
    are left as they are. ``None`` passes through.
    """
    if hours is None:
        return None
    total = int(round(hours * 3600))
    if wrap:
        total %= 86400
    h, rest = divmod(total, 3600)
    m, s = divmod(rest, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)
