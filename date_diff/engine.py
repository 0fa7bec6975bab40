"""Calendar-aware differences between two instants.

Every entry point rejects `end < start` with `InvertedRangeError` before computing anything. Calendar fields are read
in the start instant's time zone.
"""
from typing import Iterable

from absl import logging

from .datediff import DateDiff
from .duration import Duration
from .instant import Instant
from .span import Span
from .unit import Unit


def _shift(instant: Instant, unit: Unit, count: int) -> Instant:
  match unit:
    case Unit.YEARS:
      return instant.shift(years=count)
    case Unit.MONTHS:
      return instant.shift(months=count)
    case _:
      return instant + unit.size * count


def diff_calendar_unit(start: Instant, end: Instant, unit: Unit) -> tuple[int, Duration]:
  """Returns the number of whole years or months from `start` to `end`, and the remainder.

  The naive candidate from subtracting calendar fields never undershoots. It overshoots when the day or time of
  `start` has not yet come around in `end`'s month, in which case it is lowered until `start` shifted by it is no
  longer after `end`. Day-of-month roll-over means this can take two steps, e.g. Jan 31 to Mar 1.
  """
  span = Span(start, end)
  local_end = end.astimezone(start.tz)

  match unit:
    case Unit.YEARS:
      count = local_end.year - start.year
    case Unit.MONTHS:
      count = (local_end.year - start.year) * 12 + local_end.month - start.month
    case _:
      raise ValueError(f'expected a calendar unit, got {unit}')

  shifted = _shift(span.start, unit, count)
  while shifted > span.end:
    count -= 1
    shifted = _shift(span.start, unit, count)

  return count, span.end - shifted


def diff_fixed_unit(start: Instant, end: Instant, unit: Unit) -> tuple[int, Duration]:
  """Returns the number of whole fixed-length units from `start` to `end`, and the remainder."""
  span = Span(start, end)
  if unit.is_calendar:
    raise ValueError(f'expected a fixed-length unit, got {unit}')
  return divmod(span.duration(), unit.size)


def diff_unit(start: Instant, end: Instant, unit: Unit) -> tuple[int, Duration]:
  if unit.is_calendar:
    return diff_calendar_unit(start, end, unit)
  return diff_fixed_unit(start, end, unit)


def _diff_single(start: Instant, end: Instant, unit: Unit) -> DateDiff:
  count, remainder = diff_unit(start, end, unit)
  return DateDiff(**{unit.value: count, Unit.NANOSECONDS.value: remainder.duration_ns})


def diff_years(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.YEARS)


def diff_months(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.MONTHS)


def diff_weeks(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.WEEKS)


def diff_days(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.DAYS)


def diff_hours(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.HOURS)


def diff_minutes(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.MINUTES)


def diff_seconds(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.SECONDS)


def diff_milliseconds(start: Instant, end: Instant) -> DateDiff:
  return _diff_single(start, end, Unit.MILLISECONDS)


def diff_nanoseconds(start: Instant, end: Instant) -> DateDiff:
  return DateDiff(nanoseconds=Span(start, end).duration().duration_ns)


def diff(start: Instant, end: Instant, units: Iterable[str], running: bool = False) -> DateDiff:
  """Computes the requested units from `start` to `end`.

  Units are evaluated from years down to nanoseconds regardless of the order in `units`. Without `running`, each unit
  covers the whole span on its own. With `running`, `start` is advanced past each computed unit before the next one
  is computed, so the result adds back up to the span. Nanoseconds are always whatever is left.
  """
  span = Span(start, end)
  counts: dict[str, int] = {}

  for unit in Unit.select(units):
    if unit == Unit.NANOSECONDS:
      counts[unit.value] = (span.end - start).duration_ns
      break

    count, remainder = diff_unit(start, span.end, unit)
    counts[unit.value] = count
    logging.debug(f'{unit}: {count}, remainder {remainder}, from {start}')

    if running:
      start = _shift(start, unit, count)

  return DateDiff(**counts)
