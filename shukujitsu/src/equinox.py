"""Vernal and autumnal equinox days from the piecewise linear approximation.

The Cabinet Office fixes 春分の日 / 秋分の日 each February from the
observatory's ephemeris; for long-range use the commonly published formula

    day = trunc(base + 0.242194 * (year - 1980)) - trunc((year - anchor) / 4)

reproduces those dates for 1948-2150. Both terms truncate toward zero, so the
leap correction is rounded up (not floored) for years before the anchor.
"""

from dataclasses import dataclass
from datetime import date

TROPICAL_DRIFT = 0.242194  # days the equinox slips per calendar year


@dataclass(frozen=True)
class EquinoxEra:
    first_year: int
    last_year: int
    base: float
    anchor: int

    def covers(self, year: int) -> bool:
        return self.first_year <= year <= self.last_year

    def day(self, year: int) -> int:
        return int(self.base + TROPICAL_DRIFT * (year - 1980)) - int((year - self.anchor) / 4)

    def matches(self, d: date) -> bool:
        return d.day == self.day(d.year)


VERNAL_ERAS = (
    EquinoxEra(1949, 1979, 20.8357, 1983),
    EquinoxEra(1980, 2099, 20.8431, 1980),
    EquinoxEra(2100, 2150, 21.8510, 1980),
)

AUTUMNAL_ERAS = (
    EquinoxEra(1948, 1979, 23.2588, 1983),
    EquinoxEra(1980, 2099, 23.2488, 1980),
    EquinoxEra(2100, 2150, 24.2488, 1980),
)


def _equinox_day(eras: tuple[EquinoxEra, ...], year: int) -> int | None:
    for era in eras:
        if era.covers(year):
            return era.day(year)
    return None


def vernal_equinox_day(year: int) -> int | None:
    """Day of March of 春分の日, or None outside the modeled years."""
    return _equinox_day(VERNAL_ERAS, year)


def autumnal_equinox_day(year: int) -> int | None:
    """Day of September of 秋分の日, or None outside the modeled years."""
    return _equinox_day(AUTUMNAL_ERAS, year)
