from enum import StrEnum
from typing import Iterable, Self

from absl import logging

from .duration import Duration


class Unit(StrEnum):
  # Declaration order is the evaluation order.
  YEARS = 'years'
  MONTHS = 'months'
  WEEKS = 'weeks'
  DAYS = 'days'
  HOURS = 'hours'
  MINUTES = 'minutes'
  SECONDS = 'seconds'
  MILLISECONDS = 'milliseconds'
  NANOSECONDS = 'nanoseconds'

  @property
  def is_calendar(self) -> bool:
    return self in (Unit.YEARS, Unit.MONTHS)

  @property
  def size(self) -> Duration:
    if self.is_calendar:
      raise ValueError(f'calendar unit {self} has no fixed size')
    return _FIXED_SIZES[self]

  @classmethod
  def select(cls, names: Iterable[str]) -> list[Self]:
    selected = set()
    for name in names:
      try:
        selected.add(cls(name))
      except ValueError:
        logging.warning(f'Ignoring unknown unit {name!r}, expected one of {[str(unit) for unit in cls]}')

    return [unit for unit in cls if unit in selected]


_FIXED_SIZES: dict[Unit, Duration] = {
    Unit.WEEKS: Duration.WEEK,
    Unit.DAYS: Duration.DAY,
    Unit.HOURS: Duration.HOUR,
    Unit.MINUTES: Duration.MINUTE,
    Unit.SECONDS: Duration.SECOND,
    Unit.MILLISECONDS: Duration.MILLISECOND,
    Unit.NANOSECONDS: Duration.NANOSECOND,
}
