from dataclasses import dataclass, fields

from .unit import Unit


@dataclass(frozen=True, kw_only=True)
class DateDiff:
  years: int = 0
  months: int = 0
  weeks: int = 0
  days: int = 0
  hours: int = 0
  minutes: int = 0
  seconds: int = 0
  milliseconds: int = 0
  nanoseconds: int = 0

  def __post_init__(self) -> None:
    for f in fields(self):
      if (value := getattr(self, f.name)) < 0:
        raise ValueError(f'expected "{f.name}" to be non-negative, got {value}')

  def __str__(self) -> str:
    parts = [f'{unit}: {value}' for unit in Unit if (value := self.get(unit)) != 0]
    return f'diff({", ".join(parts)})'

  def get(self, unit: Unit) -> int:
    return getattr(self, unit.value)
