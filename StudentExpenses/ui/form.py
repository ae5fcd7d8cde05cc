"""Expense entry form.

The form holds no data of its own: every edit is sent to the store as a
``formFieldChanged`` request and the line edits are re-synchronised from each
new state snapshot, which is how they get cleared after a successful add.
"""
from typing import Dict, Optional

from PySide6 import QtCore, QtWidgets

from . import ui
from .actions import signals
from ..data.state import ViewState

PLACEHOLDERS = {
    'amount': 'Amount',
    'category': 'Category (e.g. Food, Transport)',
    'note': 'Note (optional)',
}


class ExpenseForm(QtWidgets.QWidget):
    """Amount, category and note inputs with an "Add Expense" button."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('StudentExpensesExpenseForm')

        self.editors: Dict[str, QtWidgets.QLineEdit] = {}
        self.add_button: Optional[QtWidgets.QPushButton] = None

        self._create_ui()
        self._connect_signals()

    def _create_ui(self) -> None:
        QtWidgets.QVBoxLayout(self)
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(ui.Size.Indicator(2.0))

        for field, placeholder in PLACEHOLDERS.items():
            editor = QtWidgets.QLineEdit(parent=self)
            editor.setObjectName(f'StudentExpenses{field.title()}Editor')
            editor.setPlaceholderText(placeholder)
            editor.setClearButtonEnabled(True)
            self.layout().addWidget(editor)
            self.editors[field] = editor

        self.editors['amount'].setInputMethodHints(QtCore.Qt.ImhFormattedNumbersOnly)

        self.add_button = QtWidgets.QPushButton('Add Expense', parent=self)
        self.add_button.setObjectName('StudentExpensesAddButton')
        self.add_button.setCursor(QtCore.Qt.PointingHandCursor)
        self.layout().addWidget(self.add_button)

    def _connect_signals(self) -> None:
        for field, editor in self.editors.items():
            # textEdited is only emitted for user edits, not for setText()
            editor.textEdited.connect(
                lambda text, f=field: signals.formFieldChanged.emit(f, text)
            )
            editor.returnPressed.connect(signals.expenseAddRequested)

        self.add_button.clicked.connect(signals.expenseAddRequested)

    @QtCore.Slot(object)
    def set_state(self, state: ViewState) -> None:
        """Synchronise the inputs with a store snapshot."""
        for field, editor in self.editors.items():
            value = getattr(state.form, field)
            if editor.text() != value:
                editor.setText(value)

        for editor in self.editors.values():
            editor.setReadOnly(state.busy)
        self.add_button.setEnabled(not state.busy)
