from .instant import Instant


class InvertedRangeError(ValueError):

  def __init__(self, start: Instant, end: Instant) -> None:
    super().__init__(f'end {end} is before start {start}')
    self.start = start
    self.end = end
