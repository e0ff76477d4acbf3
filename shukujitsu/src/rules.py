"""Holiday rule building blocks: year span, month span, day predicate."""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from enum import Enum
from typing import Callable, ClassVar


class Category(Enum):
    HOLIDAY = "holiday"
    SUBSTITUTE = "substitute"
    NATIONAL = "national"


@dataclass(frozen=True)
class _Span:
    """Closed interval [start, end] over one component of a date."""

    start: int
    end: int

    lowest: ClassVar[int]
    highest: ClassVar[int]

    def value(self, d: date) -> int:
        raise NotImplementedError

    def matches(self, d: date) -> bool:
        return self.start <= self.value(d) <= self.end

    @classmethod
    def just(cls, value: int):
        return cls(value, value)

    @classmethod
    def before(cls, value: int):
        """Everything up to and including `value`."""
        return cls(cls.lowest, value)

    @classmethod
    def after(cls, value: int):
        """Everything from `value` on, `value` included."""
        return cls(value, cls.highest)

    @classmethod
    def between(cls, start: int, end: int):
        return cls(start, end)

    @classmethod
    def any(cls):
        return cls(cls.lowest, cls.highest)


class YearSpan(_Span):
    lowest = MINYEAR
    highest = MAXYEAR

    def value(self, d: date) -> int:
        return d.year


class MonthSpan(_Span):
    lowest = 1
    highest = 12

    def value(self, d: date) -> int:
        return d.month


@dataclass(frozen=True)
class FixedDay:
    day: int

    def matches(self, d: date) -> bool:
        return d.day == self.day


@dataclass(frozen=True)
class NthWeekday:
    """The `week`-th occurrence of `weekday` (calendar.MONDAY..SUNDAY) in the month."""

    week: int
    weekday: int

    def matches(self, d: date) -> bool:
        first = d.replace(day=1)
        offset = (self.weekday - first.weekday()) % 7
        target = first + timedelta(days=7 * (self.week - 1) + offset)
        # A week index past the end of the month lands in the next one
        return target.month == d.month and target.day == d.day


@dataclass(frozen=True)
class ComputedDay:
    """Arbitrary predicate over the full date (equinoxes, substitute and bridging days)."""

    func: Callable[[date], bool]

    def matches(self, d: date) -> bool:
        return bool(self.func(d))


DayPredicate = FixedDay | NthWeekday | ComputedDay


@dataclass(frozen=True)
class DateRule:
    name: str
    category: Category
    years: YearSpan
    months: MonthSpan
    day: DayPredicate

    def matches(self, d: date) -> bool:
        return self.years.matches(d) and self.months.matches(d) and self.day.matches(d)
