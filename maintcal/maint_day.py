import arrow
import datetime
from collections.abc import Iterator

THURSDAY = 4


def weekday_from_sunday(date: arrow.Arrow) -> int:
    # 0 = Sunday ... 6 = Saturday
    return date.isoweekday() % 7


def skip_to_thursday(date: arrow.Arrow) -> arrow.Arrow:
    """Return the first Thursday on or after `date`.

    For a Monday (weekday 1) that is 3 days later, for a Thursday it is the
    same day.
    """
    offset = (THURSDAY - weekday_from_sunday(date)) % 7
    return date.shift(days=offset)


def second_thursday(date: arrow.Arrow) -> arrow.Arrow:
    first_thursday = skip_to_thursday(date.floor("month"))
    return first_thursday.shift(weeks=1)


class MaintDay:
    """Maintenance days (2nd Thursday of each month) from `start_date` on.

    Each iteration starts over from the month of `start_date` and never ends,
    so take what you need with `next()` or `itertools.islice`.
    """

    start_date: arrow.Arrow

    def __init__(
        self, start_date: arrow.Arrow | datetime.date | None = None
    ) -> None:
        if start_date is None:
            start_date = arrow.now()
        self.start_date = arrow.get(start_date)

    def __iter__(self) -> Iterator[arrow.Arrow]:
        month = self.start_date.floor("month")
        while True:
            yield second_thursday(month)
            month = month.shift(months=1)


def next_occurrence(start_date: arrow.Arrow | datetime.date) -> arrow.Arrow:
    return next(iter(MaintDay(start_date)))


def next_maintenance_day(today: arrow.Arrow | datetime.date) -> arrow.Arrow:
    # The current month's maintenance day is never announced.
    return next_occurrence(arrow.get(today).shift(months=1))
