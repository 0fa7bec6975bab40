import time

from absl import app, flags, logging

from .engine import diff
from .flagutil import value_or_default
from .instant import Instant
from .span import Span
from .unit import Unit

_START = flags.DEFINE_string(
    name='start',
    default=None,
    required=True,
    help='Start instant, RFC 3339 with up to 9 fractional digits (ex. 2024-01-01T00:00:00.000000000Z), '
    'or nanoseconds since the Unix epoch.',
)
_END = flags.DEFINE_string(
    name='end',
    default=None,
    help='End instant, in the same format as --start. '
    'If not provided, the current time is used.',
)
_UNITS = flags.DEFINE_list(
    name='units',
    default=[str(unit) for unit in Unit if unit not in (Unit.MILLISECONDS, Unit.NANOSECONDS)],
    help=f'Units to compute, any of {", ".join(Unit)}. '
    'Units are always evaluated from years down to nanoseconds. Unknown units are ignored.',
)
_RUNNING = flags.DEFINE_bool(
    name='running',
    default=True,
    help='Subtract each computed unit before computing the next smaller one. '
    'Set to False to compute every unit against the whole span.',
)


def main(args: list[str]) -> None:
  start = Instant.build(value_or_default(_START))
  if (end_flag := value_or_default(_END)) is not None:
    end = Instant.build(end_flag)
  else:
    end = Instant(time.time_ns(), start.tz)

  span = Span(start, end)
  units = value_or_default(_UNITS)
  running = value_or_default(_RUNNING)

  logging.info(f'Computing {units} over {span}, {running=}')
  print(diff(span.start, span.end, units, running))


def app_run_main() -> None:
  app.run(main)


if __name__ == '__main__':
  app_run_main()
