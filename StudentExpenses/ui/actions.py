"""Application-wide Qt signals for StudentExpenses.

This module provides:
    - Signals: custom Qt signals for the application lifecycle, expense form edits,
      add/delete requests, date filter selection, settings changes and UI actions
      (showLogs, error alerts).

Request signals are wired to the slots of :mod:`StudentExpenses.data.store`, which
turns them into database commands and new view-state snapshots.
"""
import logging

from PySide6 import QtCore


class Signals(QtCore.QObject):
    """Centralized Qt signals for application config, data, and UI events."""
    initializationRequested = QtCore.Signal()

    settingChanged = QtCore.Signal(str, object)

    formFieldChanged = QtCore.Signal(str, str)  # Field, text
    dateFilterChanged = QtCore.Signal(str)

    expenseAddRequested = QtCore.Signal()
    expenseDeleteRequested = QtCore.Signal(int)
    reloadRequested = QtCore.Signal()

    expensesChanged = QtCore.Signal()

    showLogs = QtCore.Signal()

    error = QtCore.Signal(str)

    def __init__(self):
        super().__init__()
        self._connect_signals()

    def _connect_signals(self):
        from ..data import store
        self.initializationRequested.connect(store.initialize)
        self.formFieldChanged.connect(store.set_field)
        self.dateFilterChanged.connect(store.set_filter)
        self.expenseAddRequested.connect(store.add_expense)
        self.expenseDeleteRequested.connect(store.delete_expense)
        self.reloadRequested.connect(store.reload)

        @QtCore.Slot(str, object)
        def setting_changed(key: str, value: object) -> None:
            if key != 'theme':
                return

            try:
                from . import ui
                ui.apply_theme()
            except Exception as ex:
                logging.debug(f'Error applying theme: {ex}')

        self.settingChanged.connect(setting_changed)


signals = Signals()
