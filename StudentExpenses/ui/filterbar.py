from typing import Dict, Optional

from PySide6 import QtCore, QtWidgets

from . import ui
from .actions import signals
from ..data.filter import DateFilter, FILTER_LABELS
from ..data.state import ViewState


class FilterBar(QtWidgets.QWidget):
    """Exclusive All / Week / Month toggle buttons selecting the date filter."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('StudentExpensesFilterBar')

        self.buttons: Dict[DateFilter, QtWidgets.QPushButton] = {}
        self.button_group = QtWidgets.QButtonGroup(self)
        self.button_group.setExclusive(True)

        self._create_ui()
        self._connect_signals()

    def _create_ui(self) -> None:
        QtWidgets.QHBoxLayout(self)
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(ui.Size.Indicator(1.0))

        for date_filter, label in FILTER_LABELS.items():
            button = QtWidgets.QPushButton(label, parent=self)
            button.setCheckable(True)
            button.setCursor(QtCore.Qt.PointingHandCursor)
            button.setProperty('date_filter', date_filter.value)
            self.button_group.addButton(button)
            self.layout().addWidget(button, 1)
            self.buttons[date_filter] = button

        self.buttons[DateFilter.All].setChecked(True)

    def _connect_signals(self) -> None:
        @QtCore.Slot(QtWidgets.QAbstractButton)
        def button_clicked(button: QtWidgets.QAbstractButton) -> None:
            signals.dateFilterChanged.emit(button.property('date_filter'))

        self.button_group.buttonClicked.connect(button_clicked)

    @QtCore.Slot(object)
    def set_state(self, state: ViewState) -> None:
        """Check the button of the snapshot's date filter."""
        button = self.buttons[DateFilter(state.date_filter)]
        if not button.isChecked():
            button.setChecked(True)
