"""
Historical birthplace counties encoded in pre-1990 personnummer.

Before 1990 the two serial digits after the birth date identified the county
(län) where the number was issued. Each county had its own range, e.g.
Stockholms län had 00-13.
"""

from bisect import bisect_right
from typing import Optional

BIRTHPLACE_CUTOFF_YEAR = 1990

# (first serial, last serial, label), ordered and contiguous over 0-99
BIRTHPLACE_RANGES: tuple[tuple[int, int, str], ...] = (
    (0, 13, "Stockholms län"),
    (14, 15, "Uppsala län"),
    (16, 18, "Södermanlands län"),
    (19, 23, "Östergötlands län"),
    (24, 26, "Jönköpings län"),
    (27, 28, "Kronobergs län"),
    (29, 31, "Kalmar län"),
    (32, 32, "Gotlands län"),
    (33, 34, "Blekinge län"),
    (35, 38, "Kristianstads län"),
    (39, 45, "Malmöhus län"),
    (46, 47, "Hallands län"),
    (48, 54, "Göteborgs och bohus län"),
    (55, 58, "Älvsborgs län"),
    (59, 61, "Skaraborgs län"),
    (62, 64, "Värmlands län"),
    (65, 65, "Extranummer"),
    (66, 68, "Örebro län"),
    (69, 70, "Västmanlands län"),
    (71, 73, "Kopparbergs län"),
    (74, 74, "Extranummer"),
    (75, 77, "Gävleborgs län"),
    (78, 81, "Västernorrlands län"),
    (82, 84, "Jämtlands län"),
    (85, 88, "Västerbottens län"),
    (89, 92, "Norrbottens län"),
    (93, 99, "Extranummer (immigrerade)"),
)

_RANGE_STARTS = tuple(low for low, _, _ in BIRTHPLACE_RANGES)


def get_birthplace(serial: int) -> Optional[str]:
    """Return the county for a two digit serial, or None if out of range."""
    index = bisect_right(_RANGE_STARTS, serial) - 1
    if index < 0:
        return None
    low, high, label = BIRTHPLACE_RANGES[index]
    if low <= serial <= high:
        return label
    return None
