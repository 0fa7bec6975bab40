import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import ClassVar, Self, overload

from dateutil.relativedelta import relativedelta

from .duration import Duration


@dataclass(frozen=True, order=True)
class Instant:
  """A point in time with nanosecond resolution.

  `instant_ns` counts nanoseconds since 1970-01-01T00:00:00Z. `tz` only affects how calendar fields are read and how
  calendar shifts are applied; two instants with the same `instant_ns` are equal regardless of `tz`.
  """
  instant_ns: int
  tz: tzinfo = field(default=timezone.utc, compare=False)

  _EPOCH: ClassVar[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
  _MICROSECOND: ClassVar[timedelta] = timedelta(microseconds=1)

  @classmethod
  def from_datetime(cls, dt: datetime, nanosecond: int = 0) -> Self:
    # Naive datetimes are UTC. `nanosecond` is the sub-microsecond part that datetime cannot hold.
    if not 0 <= nanosecond < 1000:
      raise ValueError(f'nanosecond {nanosecond} out of range, expected to be in range [0, 999]')
    if dt.tzinfo is None:
      dt = dt.replace(tzinfo=timezone.utc)

    microseconds = (dt - cls._EPOCH) // cls._MICROSECOND
    return cls(microseconds * 1000 + nanosecond, dt.tzinfo)  # type: ignore

  @classmethod
  def of(cls,
         year: int,
         month: int,
         day: int,
         hour: int = 0,
         minute: int = 0,
         second: int = 0,
         nanosecond: int = 0,
         tz: tzinfo = timezone.utc) -> Self:
    if not 0 <= nanosecond < 10**9:
      raise ValueError(f'nanosecond {nanosecond} out of range, expected to be in range [0, 999999999]')
    dt = datetime(year, month, day, hour, minute, second, nanosecond // 1000, tzinfo=tz)
    return cls.from_datetime(dt, nanosecond % 1000)

  def to_datetime(self) -> datetime:
    # Truncated to microseconds.
    return (self._EPOCH + timedelta(microseconds=self.instant_ns // 1000)).astimezone(self.tz)

  def astimezone(self, tz: tzinfo) -> Self:
    return self.__class__(self.instant_ns, tz)

  @property
  def year(self) -> int:
    return self.to_datetime().year

  @property
  def month(self) -> int:
    return self.to_datetime().month

  @property
  def day(self) -> int:
    return self.to_datetime().day

  def shift(self, years: int = 0, months: int = 0) -> Self:
    """Adds calendar years and months on the wall clock of `tz`.

    A day-of-month that does not exist in the target month rolls over into the next month, e.g. Jan 31 + 1 month is
    Mar 3 (Mar 2 in leap years) and Feb 29 + 1 year is Mar 1.
    """
    local = self.to_datetime()
    first_of_month = local + relativedelta(years=years, months=months, day=1)
    shifted = first_of_month + timedelta(days=local.day - 1)
    return self.from_datetime(shifted, self.instant_ns % 1000)

  def __str__(self) -> str:
    local = self.to_datetime()
    iso_format = local.isoformat(timespec='seconds')
    offset = 'Z' if not local.utcoffset() else iso_format[19:]
    nanoseconds = '{:09d}'.format(self.instant_ns % 10**9)
    return iso_format[:19] + '.' + nanoseconds + offset

  @overload
  def __sub__(self, other: Duration) -> Self:
    ...

  @overload
  def __sub__(self, other: 'Instant') -> Duration:
    ...

  def __sub__(self, other: object) -> Self | Duration:
    if isinstance(other, Duration):
      return self.__class__(self.instant_ns - other.duration_ns, self.tz)
    if isinstance(other, Instant):
      return Duration(self.instant_ns - other.instant_ns)
    return NotImplemented

  def __add__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(self.instant_ns + other.duration_ns, self.tz)
    return NotImplemented

  _REGEX: ClassVar[str] = (r'^'
                           r'(?P<date>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})'
                           r'(?:\.(?P<fraction>\d{1,9}))?'
                           r'(?P<offset>Z|(?P<sign>[+-])(?P<offset_hours>\d{2}):(?P<offset_minutes>\d{2}))'
                           r'$')
  _PATTERN: ClassVar[re.Pattern[str]] = re.compile(_REGEX)
  _STRPTIME_FORMAT: ClassVar[str] = '%Y-%m-%dT%H:%M:%S'

  @classmethod
  def build(cls, s: str) -> Self:
    try:
      return cls(int(s))
    except ValueError:
      pass

    assert (match := cls._PATTERN.search(s)) is not None, f'unable to match regex {cls._REGEX}'
    date = datetime.strptime(str(match['date']), cls._STRPTIME_FORMAT)
    nanoseconds = int((match['fraction'] or '').ljust(9, '0'))

    if match['offset'] == 'Z':
      tz = timezone.utc
    else:
      offset = timedelta(hours=int(match['offset_hours']), minutes=int(match['offset_minutes']))
      tz = timezone(-offset if match['sign'] == '-' else offset)

    return cls.from_datetime(date.replace(microsecond=nanoseconds // 1000, tzinfo=tz), nanoseconds % 1000)
