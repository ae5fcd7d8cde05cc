"""Immutable view-state snapshots and the reducer that advances them.

The screen is described by a single :class:`ViewState` value. Nothing mutates
it: every change is expressed as an action and :func:`reduce` returns a new
snapshot. The store (:mod:`StudentExpenses.data.store`) owns the current
snapshot and broadcasts each new one to the views.
"""
import datetime
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .expense import Expense
from .filter import DateFilter, filter_expenses

FORM_FIELDS = ('amount', 'category', 'note')


@dataclass(frozen=True, slots=True)
class FormState:
    """Raw text of the expense form."""
    amount: str = ''
    category: str = ''
    note: str = ''


@dataclass(frozen=True, slots=True)
class ViewState:
    """One immutable snapshot of the screen."""
    expenses: Tuple[Expense, ...] = ()
    form: FormState = field(default_factory=FormState)
    date_filter: DateFilter = DateFilter.All
    busy: bool = False

    def visible(self, today: Optional[datetime.date] = None) -> Tuple[Expense, ...]:
        """Return the expenses that pass the current date filter."""
        return filter_expenses(self.expenses, self.date_filter, today)


@dataclass(frozen=True, slots=True)
class ExpensesLoaded:
    expenses: Tuple[Expense, ...]


@dataclass(frozen=True, slots=True)
class FieldEdited:
    field: str
    value: str


@dataclass(frozen=True, slots=True)
class FilterSelected:
    date_filter: DateFilter


@dataclass(frozen=True, slots=True)
class SubmitStarted:
    pass


@dataclass(frozen=True, slots=True)
class SubmitSucceeded:
    pass


@dataclass(frozen=True, slots=True)
class SubmitFailed:
    pass


def reduce(state: ViewState, action) -> ViewState:
    """Return the snapshot that results from applying an action.

    Args:
        state: The current snapshot.
        action: One of the action classes defined in this module.

    Returns:
        ViewState: The new snapshot.

    Raises:
        ValueError: For an unknown form field or date filter.
        TypeError: For an unknown action.
    """
    if isinstance(action, ExpensesLoaded):
        return replace(state, expenses=tuple(action.expenses))

    if isinstance(action, FieldEdited):
        if action.field not in FORM_FIELDS:
            raise ValueError(f'Unknown form field: {action.field}, must be one of {FORM_FIELDS}')
        form = replace(state.form, **{action.field: action.value})
        return replace(state, form=form)

    if isinstance(action, FilterSelected):
        return replace(state, date_filter=DateFilter(action.date_filter))

    if isinstance(action, SubmitStarted):
        return replace(state, busy=True)

    if isinstance(action, SubmitSucceeded):
        return replace(state, form=FormState(), busy=False)

    if isinstance(action, SubmitFailed):
        return replace(state, busy=False)

    raise TypeError(f'Unknown action: {action!r}')
