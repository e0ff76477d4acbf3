"""Japanese public holidays. Pure computation, no external dependencies.

Every revision of the National Holidays Act (国民の祝日に関する法律) since
1948 is one row of HOLIDAY_RULES. A date is resolved by scanning the table in
order and taking the first rule whose year, month and day predicates all hold.
Substitute (振替休日) and bridging (国民の休日) rules query their neighbours
through resolve() restricted to genuine holidays, which bounds the recursion
to a single level.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .equinox import AUTUMNAL_ERAS, VERNAL_ERAS
from .rules import (
    Category,
    ComputedDay,
    DateRule,
    FixedDay,
    MonthSpan,
    NthWeekday,
    YearSpan,
)

ONE_DAY = timedelta(days=1)

# Enforcement date of the 1973 amendment introducing 振替休日
SUBSTITUTE_HOLIDAY_START = date(1973, 4, 12)

ENGLISH_NAMES = {
    "元日": "New Year's Day",
    "成人の日": "Coming of Age Day",
    "建国記念の日": "National Foundation Day",
    "昭和の日": "Showa Day",
    "憲法記念日": "Constitution Memorial Day",
    "みどりの日": "Greenery Day",
    "こどもの日": "Children's Day",
    "海の日": "Marine Day",
    "山の日": "Mountain Day",
    "敬老の日": "Respect for the Aged Day",
    "体育の日": "Health and Sports Day",
    "スポーツの日": "Sports Day",
    "文化の日": "Culture Day",
    "勤労感謝の日": "Labour Thanksgiving Day",
    "天皇誕生日": "Emperor's Birthday",
    "春分の日": "Vernal Equinox Day",
    "秋分の日": "Autumnal Equinox Day",
    "即位礼正殿の儀": "Enthronement Ceremony",
    "天皇の即位の日": "Emperor's Accession Day",
    "皇太子徳仁親王の結婚の儀": "Wedding of Crown Prince Naruhito",
    "昭和天皇の大喪の礼": "Funeral of Emperor Showa",
    "皇太子明仁親王の結婚の儀": "Wedding of Crown Prince Akihito",
    "振替休日": "Substitute Holiday",
    "国民の休日": "Citizens' Holiday",
}


@dataclass(frozen=True)
class Holiday:
    name: str
    date: date
    category: Category = Category.HOLIDAY

    @property
    def name_en(self) -> str:
        return ENGLISH_NAMES.get(self.name, self.name)


def _shift(d: date, days: int) -> date | None:
    """d + days, or None past either end of the representable calendar."""
    try:
        return d + timedelta(days=days)
    except OverflowError:
        return None


def _is_genuine_holiday(d: date | None) -> bool:
    return d is not None and resolve(d) is not None


def _substitute_since_2007(d: date) -> bool:
    """The first non-holiday after a run of holidays containing a Sunday."""
    prev = _shift(d, -1)
    while _is_genuine_holiday(prev):
        if prev.weekday() == calendar.SUNDAY:
            return True
        prev = _shift(prev, -1)
    return False


def _substitute_until_2006(d: date) -> bool:
    """The day right after a holiday falling on Sunday."""
    if d < SUBSTITUTE_HOLIDAY_START:
        return False
    prev = _shift(d, -1)
    return prev.weekday() == calendar.SUNDAY and _is_genuine_holiday(prev)


def _national_holiday(d: date) -> bool:
    """A non-Sunday sandwiched between two holidays."""
    if d.weekday() == calendar.SUNDAY:
        return False
    return _is_genuine_holiday(_shift(d, -1)) and _is_genuine_holiday(_shift(d, 1))


def _holiday(name, years, months, day) -> DateRule:
    return DateRule(name, Category.HOLIDAY, years, months, day)


HOLIDAY_RULES = (
    _holiday("元日", YearSpan.after(1949), MonthSpan.just(1), FixedDay(1)),
    _holiday("成人の日", YearSpan.after(2000), MonthSpan.just(1), NthWeekday(2, calendar.MONDAY)),
    _holiday("成人の日", YearSpan.between(1949, 1999), MonthSpan.just(1), FixedDay(15)),
    _holiday("建国記念の日", YearSpan.after(1967), MonthSpan.just(2), FixedDay(11)),
    _holiday("昭和の日", YearSpan.after(2007), MonthSpan.just(4), FixedDay(29)),
    _holiday("憲法記念日", YearSpan.after(1949), MonthSpan.just(5), FixedDay(3)),
    _holiday("みどりの日", YearSpan.after(2007), MonthSpan.just(5), FixedDay(4)),
    _holiday("みどりの日", YearSpan.between(1989, 2006), MonthSpan.just(4), FixedDay(29)),
    _holiday("こどもの日", YearSpan.after(1949), MonthSpan.just(5), FixedDay(5)),
    # 2020 and 2021 dates moved for the Tokyo Games by the special-measures act (amended 2020)
    _holiday("海の日", YearSpan.after(2022), MonthSpan.just(7), NthWeekday(3, calendar.MONDAY)),
    _holiday("海の日", YearSpan.just(2021), MonthSpan.just(7), FixedDay(22)),
    _holiday("海の日", YearSpan.just(2020), MonthSpan.just(7), FixedDay(23)),
    _holiday("海の日", YearSpan.between(2003, 2019), MonthSpan.just(7), NthWeekday(3, calendar.MONDAY)),
    _holiday("海の日", YearSpan.between(1996, 2002), MonthSpan.just(7), FixedDay(20)),
    _holiday("山の日", YearSpan.after(2022), MonthSpan.just(8), FixedDay(11)),
    _holiday("山の日", YearSpan.just(2021), MonthSpan.just(8), FixedDay(8)),
    _holiday("山の日", YearSpan.just(2020), MonthSpan.just(8), FixedDay(10)),
    _holiday("山の日", YearSpan.between(2016, 2019), MonthSpan.just(8), FixedDay(11)),
    _holiday("敬老の日", YearSpan.after(2003), MonthSpan.just(9), NthWeekday(3, calendar.MONDAY)),
    _holiday("敬老の日", YearSpan.between(1966, 2002), MonthSpan.just(9), FixedDay(15)),
    _holiday("体育の日", YearSpan.between(2000, 2019), MonthSpan.just(10), NthWeekday(2, calendar.MONDAY)),
    _holiday("体育の日", YearSpan.between(1966, 1999), MonthSpan.just(10), FixedDay(10)),
    _holiday("スポーツの日", YearSpan.after(2022), MonthSpan.just(10), NthWeekday(2, calendar.MONDAY)),
    _holiday("スポーツの日", YearSpan.just(2021), MonthSpan.just(7), FixedDay(23)),
    _holiday("スポーツの日", YearSpan.just(2020), MonthSpan.just(7), FixedDay(24)),
    _holiday("文化の日", YearSpan.after(1948), MonthSpan.just(11), FixedDay(3)),
    _holiday("勤労感謝の日", YearSpan.after(1948), MonthSpan.just(11), FixedDay(23)),
    _holiday("天皇誕生日", YearSpan.after(2020), MonthSpan.just(2), FixedDay(23)),
    _holiday("天皇誕生日", YearSpan.between(1989, 2018), MonthSpan.just(12), FixedDay(23)),
    _holiday("天皇誕生日", YearSpan.between(1949, 1988), MonthSpan.just(4), FixedDay(29)),
    *(
        _holiday("春分の日", YearSpan.between(era.first_year, era.last_year),
                 MonthSpan.just(3), ComputedDay(era.matches))
        for era in VERNAL_ERAS
    ),
    *(
        _holiday("秋分の日", YearSpan.between(era.first_year, era.last_year),
                 MonthSpan.just(9), ComputedDay(era.matches))
        for era in AUTUMNAL_ERAS
    ),
    # One-off ceremonial holidays, each enacted by its own law
    _holiday("即位礼正殿の儀", YearSpan.just(2019), MonthSpan.just(10), FixedDay(22)),
    _holiday("即位礼正殿の儀", YearSpan.just(1990), MonthSpan.just(11), FixedDay(12)),
    _holiday("天皇の即位の日", YearSpan.just(2019), MonthSpan.just(5), FixedDay(1)),
    _holiday("皇太子徳仁親王の結婚の儀", YearSpan.just(1993), MonthSpan.just(6), FixedDay(9)),
    _holiday("昭和天皇の大喪の礼", YearSpan.just(1989), MonthSpan.just(2), FixedDay(24)),
    _holiday("皇太子明仁親王の結婚の儀", YearSpan.just(1959), MonthSpan.just(4), FixedDay(10)),

    DateRule("振替休日", Category.SUBSTITUTE, YearSpan.after(2007), MonthSpan.any(),
             ComputedDay(_substitute_since_2007)),
    DateRule("振替休日", Category.SUBSTITUTE, YearSpan.between(1973, 2006), MonthSpan.any(),
             ComputedDay(_substitute_until_2006)),

    DateRule("国民の休日", Category.NATIONAL, YearSpan.after(1986), MonthSpan.any(),
             ComputedDay(_national_holiday)),
)


def _as_date(d: date) -> date:
    # datetime (and pd.Timestamp) subclass date; keep only the calendar day
    return d.date() if isinstance(d, datetime) else d


def resolve(
    d: date,
    include_substitute: bool = False,
    include_national: bool = False,
) -> Holiday | None:
    """Return the first rule in HOLIDAY_RULES matching d, as a Holiday.

    With both flags off only genuine holidays are considered; that is the
    mode the substitute and bridging rules use for their neighbour lookups.
    """
    d = _as_date(d)
    for rule in HOLIDAY_RULES:
        if rule.category is Category.SUBSTITUTE and not include_substitute:
            continue
        if rule.category is Category.NATIONAL and not include_national:
            continue
        if rule.matches(d):
            return Holiday(rule.name, d, rule.category)
    return None


def get_holiday(d: date) -> Holiday | None:
    """Holiday on d, counting substitute and bridging days, or None."""
    return resolve(d, include_substitute=True, include_national=True)


def is_holiday(d: date) -> bool:
    """Check if a date is a Japanese public holiday."""
    return get_holiday(d) is not None


def get_holidays(start: date, end: date) -> list[Holiday]:
    """Return holidays in [start, end] in date order. Empty if end < start."""
    start, end = _as_date(start), _as_date(end)
    result = []
    for offset in range((end - start).days + 1):
        holiday = get_holiday(start + timedelta(days=offset))
        if holiday is not None:
            result.append(holiday)
    return result


def exists_holiday(start: date, end: date) -> bool:
    """True if any date in [start, end] is a holiday."""
    start, end = _as_date(start), _as_date(end)
    for offset in range((end - start).days + 1):
        if get_holiday(start + timedelta(days=offset)) is not None:
            return True
    return False


def holidays_in_year(year: int) -> list[Holiday]:
    """Return all holidays of a calendar year."""
    return get_holidays(date(year, 1, 1), date(year, 12, 31))
