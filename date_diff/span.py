from dataclasses import dataclass

from .duration import Duration
from .instant import Instant
from .invertedrangeerror import InvertedRangeError


@dataclass(frozen=True)
class Span:
  start: Instant
  end: Instant

  def __post_init__(self) -> None:
    if self.end < self.start:
      raise InvertedRangeError(self.start, self.end)

  def __str__(self) -> str:
    return f'span(start: {self.start}, end: {self.end})'

  def duration(self) -> Duration:
    return self.end - self.start
