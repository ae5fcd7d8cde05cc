import logging
from typing import Any, Tuple

from PySide6 import QtCore

from ..expense import Expense
from ..state import ViewState
from ...settings import lib
from ...settings import locale

IdRole = QtCore.Qt.UserRole + 1
AmountRole = QtCore.Qt.UserRole + 2
CategoryRole = QtCore.Qt.UserRole + 3
NoteRole = QtCore.Qt.UserRole + 4
DateRole = QtCore.Qt.UserRole + 5


class ExpenseListModel(QtCore.QAbstractListModel):
    """List model of the expenses that pass the current date filter, newest first.

    The model holds no state of its own: it is rebuilt from each store snapshot
    passed to :meth:`set_state`.
    """

    def __init__(self, parent: QtCore.QObject | None = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('StudentExpensesExpenseListModel')

        self._expenses: Tuple[Expense, ...] = ()

        self._connect_signals()

    def _connect_signals(self) -> None:
        from ...ui.actions import signals
        signals.settingChanged.connect(self.on_setting_changed)

    @QtCore.Slot(str, object)
    def on_setting_changed(self, key: str, value: object) -> None:
        """Repaint the amounts when the locale changes."""
        if key != 'locale' or not self._expenses:
            return
        self.dataChanged.emit(
            self.index(0, 0),
            self.index(self.rowCount() - 1, 0),
            [QtCore.Qt.DisplayRole, QtCore.Qt.ToolTipRole]
        )

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._expenses)

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole) -> Any:
        if not index.isValid():
            return None

        row = index.row()
        if row < 0 or row >= self.rowCount():
            return None

        expense = self._expenses[row]

        if role == IdRole:
            return expense.id
        if role == AmountRole:
            return expense.amount
        if role == CategoryRole:
            return expense.category
        if role == NoteRole:
            return expense.note
        if role == DateRole:
            return expense.date_str

        if role == QtCore.Qt.DisplayRole:
            return f'{self.amount_text(expense)}  {expense.category}'
        if role in (QtCore.Qt.ToolTipRole, QtCore.Qt.StatusTipRole):
            parts = [expense.date_str, self.amount_text(expense), expense.category]
            if expense.note:
                parts.append(expense.note)
            return '\n'.join(parts)

        return None

    @staticmethod
    def amount_text(expense: Expense) -> str:
        """Return the amount formatted for the configured locale."""
        return locale.format_currency_value(expense.amount, lib.settings['locale'])

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        """tuple[Expense, ...]: The rows currently shown."""
        return self._expenses

    @QtCore.Slot(object)
    def set_state(self, state: ViewState) -> None:
        """Rebuild the rows from a store snapshot.

        Args:
            state: The snapshot to display.
        """
        expenses = state.visible()
        if expenses == self._expenses:
            return

        logging.debug(f'Showing {len(expenses)} of {len(state.expenses)} expense(s) ({state.date_filter})')
        self.beginResetModel()
        self._expenses = expenses
        self.endResetModel()
