"""Named daytime phases.

Index 0-11 are the night phases counted from sunset, index 12-23 the day
phases counted from sunrise. A seasonal hour index of ``-12..-1`` maps to
``0..11`` and ``1..12`` maps to ``12..23`` when both halves have 12 parts.
"""

from __future__ import annotations

DAYPHASES: tuple[str, ...] = (
    # night
    "Dusk",
    "Early evening",
    "Evening",
    "Late evening",
    "Early night",
    "Before midnight",
    "Midnight",
    "After midnight",
    "Late night",
    "Cock-crow",
    "First morning light",
    "Dawn",
    # day
    "Breaking dawn",
    "Early morning",
    "Morning",
    "Early forenoon",
    "Forenoon",
    "Late forenoon",
    "Noon",
    "Early afternoon",
    "Afternoon",
    "Afternoon",
    "Late afternoon",
    "First dusk",
)

# Label prefixes for the 12/4 roman clock
ROMAN_DAY_PREFIX = "Hora"
ROMAN_NIGHT_PREFIX = "Vigilia"
