"""Expense store: owns the current view-state snapshot and runs database commands.

The flow is one-directional. Widgets emit request signals (see
:mod:`StudentExpenses.ui.actions`), the module-level slots below forward them to
the active :class:`ExpenseStore`, which talks to the database, reduces an action
into a new :class:`~StudentExpenses.data.state.ViewState` and broadcasts it via
:attr:`ExpenseStore.stateChanged`.
"""
import logging
from typing import Optional

from PySide6 import QtCore

from . import state as st
from .expense import validate_expense
from .filter import DateFilter
from ..status.status import BaseStatusException


class ExpenseStore(QtCore.QObject):
    """Holds the current :class:`~StudentExpenses.data.state.ViewState` and applies commands to it.

    Signals:
        stateChanged (object): Emitted with the new snapshot after every dispatched action.
    """
    stateChanged = QtCore.Signal(object)

    def __init__(self, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent=parent)
        self._state = st.ViewState()

    @property
    def state(self) -> st.ViewState:
        """ViewState: The current snapshot."""
        return self._state

    def dispatch(self, action) -> st.ViewState:
        """Reduce an action into a new snapshot and broadcast it.

        Args:
            action: One of the actions defined in :mod:`StudentExpenses.data.state`.

        Returns:
            ViewState: The new snapshot.
        """
        self._state = st.reduce(self._state, action)
        self.stateChanged.emit(self._state)
        return self._state

    @QtCore.Slot()
    def initialize(self) -> None:
        """Set up the database table and load the stored expenses."""
        from ..core.database import database
        from ..settings import lib

        reset = bool(lib.settings['reset_on_launch'])
        try:
            database.setup(reset=reset)
        except BaseStatusException as ex:
            logging.debug(f'Database setup failed: {ex}')
            return
        self.load()

    @QtCore.Slot()
    def load(self) -> None:
        """Reload all expenses from the database, newest first.

        The current list is kept if the read fails.
        """
        from ..core.database import database

        try:
            expenses = tuple(database.expenses())
        except BaseStatusException as ex:
            logging.debug(f'Keeping the current list, the reload failed: {ex}')
            return

        logging.debug(f'Loaded {len(expenses)} expense(s)')
        self.dispatch(st.ExpensesLoaded(expenses))

        from ..ui.actions import signals
        signals.expensesChanged.emit()

    @QtCore.Slot(str, str)
    def set_field(self, field: str, value: str) -> None:
        """Record an edit of one of the form fields."""
        self.dispatch(st.FieldEdited(field, value))

    @QtCore.Slot(str)
    def set_filter(self, date_filter: str) -> None:
        """Select a date filter."""
        self.dispatch(st.FilterSelected(DateFilter(date_filter)))

    @QtCore.Slot()
    def add(self) -> bool:
        """Validate the form and store a new expense.

        Ignored while a previous submission is still in flight.

        Returns:
            bool: True if the expense was stored.
        """
        if self._state.busy:
            logging.debug('Add request ignored: a submission is already in progress.')
            return False

        from ..core.database import database

        form = self._state.form
        self.dispatch(st.SubmitStarted())
        try:
            new_expense = validate_expense(form.amount, form.category, form.note)
            database.add_expense(new_expense)
        except BaseStatusException as ex:
            logging.debug(f'Expense not added: {ex}')
            self.dispatch(st.SubmitFailed())
            return False

        self.dispatch(st.SubmitSucceeded())
        self.load()
        return True

    @QtCore.Slot(int)
    def delete(self, expense_id: int) -> bool:
        """Delete one expense and reload the list.

        Returns:
            bool: True if a row was removed.
        """
        from ..core.database import database

        try:
            count = database.delete_expense(expense_id)
        except BaseStatusException as ex:
            logging.debug(f'Expense not deleted: {ex}')
            return False

        self.load()
        return count > 0


store: ExpenseStore = ExpenseStore()


@QtCore.Slot()
def initialize() -> None:
    store.initialize()


@QtCore.Slot()
def reload() -> None:
    store.load()


@QtCore.Slot(str, str)
def set_field(field: str, value: str) -> None:
    store.set_field(field, value)


@QtCore.Slot(str)
def set_filter(date_filter: str) -> None:
    store.set_filter(date_filter)


@QtCore.Slot()
def add_expense() -> None:
    store.add()


@QtCore.Slot(int)
def delete_expense(expense_id: int) -> None:
    store.delete(expense_id)
