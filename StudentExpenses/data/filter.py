"""Date-range filtering of the expense list.

:func:`filter_expenses` narrows a list of expenses to the rows dated on or after
a cutoff derived from today's date. Results are memoised on the
(rows, selector, today) triple, so repeated renders of the same snapshot reuse
the previously derived tuple.
"""
import datetime
import enum
import functools
from typing import Iterable, Optional, Tuple

from dateutil.relativedelta import relativedelta

from .expense import Expense

WEEK_DAYS = 7


class DateFilter(enum.StrEnum):
    """Selectors of the date filter bar."""
    All = 'all'
    Week = 'week'
    Month = 'month'


FILTER_LABELS = {
    DateFilter.All: 'All',
    DateFilter.Week: 'This Week',
    DateFilter.Month: 'This Month',
}


def get_cutoff(date_filter: DateFilter, today: datetime.date) -> Optional[datetime.date]:
    """Return the earliest date kept by the filter, or None when nothing is filtered out.

    Args:
        date_filter: The selected filter.
        today: The reference date.

    Returns:
        datetime.date or None: The inclusive lower bound.
    """
    date_filter = DateFilter(date_filter)

    if date_filter == DateFilter.Week:
        return today - datetime.timedelta(days=WEEK_DAYS)
    if date_filter == DateFilter.Month:
        # relativedelta clamps to the end of shorter months (Mar 31 -> Feb 28/29)
        return today - relativedelta(months=1)
    return None


@functools.lru_cache(maxsize=32)
def _filter(expenses: Tuple[Expense, ...], date_filter: DateFilter,
            today: datetime.date) -> Tuple[Expense, ...]:
    cutoff = get_cutoff(date_filter, today)
    if cutoff is None:
        return expenses
    return tuple(e for e in expenses if e.date >= cutoff)


def filter_expenses(expenses: Iterable[Expense], date_filter: DateFilter,
                    today: Optional[datetime.date] = None) -> Tuple[Expense, ...]:
    """Filter expenses by date range relative to today.

    Args:
        expenses: Expenses to filter. Their order is preserved.
        date_filter: One of the :class:`DateFilter` selectors (or its string value).
        today: Reference date. Defaults to the local current date.

    Returns:
        tuple[Expense, ...]: The expenses dated on or after the filter's cutoff.

    Raises:
        ValueError: If date_filter is not a known selector.
    """
    return _filter(
        tuple(expenses),
        DateFilter(date_filter),
        today or datetime.date.today()
    )


def clear_cache() -> None:
    """Drop all memoised filter results."""
    _filter.cache_clear()
