from dataclasses import dataclass
from typing import ClassVar, Self


@dataclass(frozen=True, order=True)
class Duration:
  duration_ns: int

  _MILLISECOND_NS: ClassVar[int] = 10**6
  _SECOND_NS: ClassVar[int] = 10**9
  _MINUTE_NS: ClassVar[int] = _SECOND_NS * 60
  _HOUR_NS: ClassVar[int] = _MINUTE_NS * 60
  _DAY_NS: ClassVar[int] = _HOUR_NS * 24
  _WEEK_NS: ClassVar[int] = _DAY_NS * 7

  def __str__(self) -> str:
    ns = self.duration_ns
    sign = '-' if ns < 0 else '+'
    ns = abs(ns)

    hours = ns // self._HOUR_NS
    ns %= self._HOUR_NS
    minutes = ns // self._MINUTE_NS
    ns %= self._MINUTE_NS
    seconds = ns // self._SECOND_NS
    ns %= self._SECOND_NS

    return f'{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{ns:09d}'

  def __add__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(self.duration_ns + other.duration_ns)
    return NotImplemented

  def __sub__(self, other: object) -> Self:
    if isinstance(other, Duration):
      return self.__class__(self.duration_ns - other.duration_ns)
    return NotImplemented

  def __neg__(self) -> Self:
    return self.__class__(-self.duration_ns)

  def __truediv__(self, other: object) -> float:
    if isinstance(other, Duration):
      return self.duration_ns / other.duration_ns
    return NotImplemented

  def __mul__(self, other: object) -> Self:
    if isinstance(other, int):
      return self.__class__(self.duration_ns * other)
    return NotImplemented

  __rmul__ = __mul__

  def __divmod__(self, other: object) -> tuple[int, Self]:
    if isinstance(other, Duration):
      if other.duration_ns <= 0:
        raise ValueError(f'expected divisor to be a positive Duration, got {other}')
      count, remainder_ns = divmod(self.duration_ns, other.duration_ns)
      return count, self.__class__(remainder_ns)
    return NotImplemented

  ZERO: ClassVar[Self]
  NANOSECOND: ClassVar[Self]
  MILLISECOND: ClassVar[Self]
  SECOND: ClassVar[Self]
  MINUTE: ClassVar[Self]
  HOUR: ClassVar[Self]
  DAY: ClassVar[Self]
  WEEK: ClassVar[Self]


Duration.ZERO = Duration(0)
Duration.NANOSECOND = Duration(1)
Duration.MILLISECOND = Duration(Duration._MILLISECOND_NS)
Duration.SECOND = Duration(Duration._SECOND_NS)
Duration.MINUTE = Duration(Duration._MINUTE_NS)
Duration.HOUR = Duration(Duration._HOUR_NS)
Duration.DAY = Duration(Duration._DAY_NS)
Duration.WEEK = Duration(Duration._WEEK_NS)
