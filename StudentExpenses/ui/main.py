"""Main window composition and UI entry point for StudentExpenses.

This module defines:
    - show(): initialize and display the main window
    - HeadingLabel: the application name shown above the form
    - MainWindow: heading, entry form, filter bar, expense list, footer and a hidden log dock
"""
import logging
from typing import Optional

from PySide6 import QtWidgets, QtCore, QtGui

from . import ui
from .actions import signals
from .filterbar import FilterBar
from .form import ExpenseForm
from .view import ExpenseListView
from ..log.view import LogDockWidget
from ..settings.lib import app_name

FOOTER_TEXT = "Enter your expenses and they'll be saved locally with SQLite."

widget = None


def show():
    global widget

    if widget is None:
        widget = MainWindow()

    widget.show()
    return widget


class HeadingLabel(QtWidgets.QLabel):
    """Shows the application name from the settings."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('StudentExpensesHeading')
        self.update_title()
        self._connect_signals()

    def _connect_signals(self) -> None:
        signals.settingChanged.connect(self.setting_changed)

    @QtCore.Slot(str, object)
    def setting_changed(self, key: str, value: object) -> None:
        if key == 'name':
            self.update_title()

    @QtCore.Slot()
    def update_title(self) -> None:
        from ..settings import lib
        self.setText(lib.settings['name'] or app_name)


class MainWindow(QtWidgets.QMainWindow):
    """The single screen of the application."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setWindowTitle(app_name)
        self.setObjectName('StudentExpensesMainWindow')

        self.heading: HeadingLabel
        self.form: ExpenseForm
        self.filter_bar: FilterBar
        self.expense_view: ExpenseListView
        self.footer: QtWidgets.QLabel
        self.log_view: LogDockWidget

        self._create_ui()
        self._init_actions()
        self._connect_signals()
        self.load_window_settings()

    def _create_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(central)
        margin = ui.Size.Margin(1.0)
        layout.setContentsMargins(margin, margin, margin, margin)
        layout.setSpacing(ui.Size.Margin(0.5))
        self.setCentralWidget(central)

        self.heading = HeadingLabel(parent=central)
        layout.addWidget(self.heading, 0)

        self.form = ExpenseForm(parent=central)
        layout.addWidget(self.form, 0)

        self.filter_bar = FilterBar(parent=central)
        layout.addWidget(self.filter_bar, 0)

        self.expense_view = ExpenseListView(parent=central)
        layout.addWidget(self.expense_view, 1)

        self.footer = QtWidgets.QLabel(FOOTER_TEXT, parent=central)
        self.footer.setObjectName('StudentExpensesFooter')
        self.footer.setAlignment(QtCore.Qt.AlignCenter)
        self.footer.setWordWrap(True)
        layout.addWidget(self.footer, 0)

        self.log_view = LogDockWidget(parent=self)
        self.addDockWidget(QtCore.Qt.BottomDockWidgetArea, self.log_view)
        self.log_view.hide()

    def _init_actions(self) -> None:
        action = QtGui.QAction('Logs', self)
        action.setShortcut('Ctrl+L')
        action.setShortcutContext(QtCore.Qt.ApplicationShortcut)
        action.triggered.connect(self.log_view.toggle)
        self.addAction(action)

    def _connect_signals(self) -> None:
        from ..data import store

        for widget in (self.form, self.filter_bar, self.expense_view):
            store.store.stateChanged.connect(widget.set_state)
            widget.set_state(store.store.state)

        signals.showLogs.connect(self.show_logs)
        # Queued, so the message box opens after the failing command has returned
        signals.error.connect(self.show_error, QtCore.Qt.QueuedConnection)

    @QtCore.Slot()
    def show_logs(self) -> None:
        self.log_view.show()
        self.log_view.raise_()

    @QtCore.Slot(str)
    def show_error(self, message: str) -> None:
        QtWidgets.QMessageBox.warning(self, app_name, message, QtWidgets.QMessageBox.Ok)

    def sizeHint(self):
        return QtCore.QSize(
            ui.Size.DefaultWidth(1.0),
            ui.Size.DefaultHeight(1.0)
        )

    def closeEvent(self, event) -> None:
        """Persist window geometry and state on close."""
        settings = QtCore.QSettings(app_name, app_name)
        settings.setValue('MainWindow/geometry', self.saveGeometry())
        settings.setValue('MainWindow/windowState', self.saveState())
        super().closeEvent(event)

    def load_window_settings(self) -> None:
        settings = QtCore.QSettings(app_name, app_name)

        geometry = settings.value('MainWindow/geometry')
        if isinstance(geometry, QtCore.QByteArray) and self.restoreGeometry(geometry):
            logging.debug('Restored window geometry')
        else:
            self.resize(self.sizeHint())
            screen = QtGui.QGuiApplication.primaryScreen()
            if screen:
                avail = screen.availableGeometry()
                self.move(
                    avail.x() + (avail.width() - self.width()) // 2,
                    avail.y() + (avail.height() - self.height()) // 2
                )

        state = settings.value('MainWindow/windowState')
        if isinstance(state, QtCore.QByteArray):
            self.restoreState(state)
