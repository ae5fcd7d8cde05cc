"""Log panel of the main window.

This module provides:
    - LogTableView: table of the session's log messages, newest at the bottom
    - LogDockWidget: bottom dock hosting the table, toggled with Ctrl+L and raised on errors
"""
import logging
from typing import Callable

from PySide6 import QtCore, QtWidgets, QtGui

from . import log
from .model import LogFilterProxyModel, LogTableModel, Columns
from ..ui import ui

LEVEL_NAMES = (
    ('Debug', logging.DEBUG),
    ('Info', logging.INFO),
    ('Warning', logging.WARNING),
    ('Error', logging.ERROR),
    ('Critical', logging.CRITICAL),
)


class LogTableView(QtWidgets.QTableView):
    """Read-only table over a level-filtered :class:`LogTableModel`."""

    def __init__(self, parent=None):
        super().__init__(parent=parent)
        self.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.setWordWrap(False)
        self.setShowGrid(False)
        self.setContextMenuPolicy(QtCore.Qt.ActionsContextMenu)

        proxy = LogFilterProxyModel(self)
        proxy.setSourceModel(LogTableModel(parent=self))
        self.setModel(proxy)

        columns = self.horizontalHeader()
        for column in (Columns.Date, Columns.Module, Columns.Level):
            columns.setSectionResizeMode(column.value, QtWidgets.QHeaderView.ResizeToContents)
        columns.setSectionResizeMode(Columns.Message.value, QtWidgets.QHeaderView.Stretch)

        rows = self.verticalHeader()
        rows.setDefaultSectionSize(ui.Size.RowHeight(0.8))
        rows.setHidden(True)

        proxy.rowsInserted.connect(self.scrollToBottom)

    def sizeHint(self):
        return QtCore.QSize(ui.Size.DefaultWidth(1.0), ui.Size.DefaultHeight(0.3))


class LogDockWidget(QtWidgets.QDockWidget):
    """Bottom dock showing the log table.

    The table only polls the log tank while the dock is visible.
    """

    def __init__(self, parent=None) -> None:
        super().__init__('Logs', parent=parent)
        self.setObjectName('StudentExpensesLogDockWidget')
        self.setFeatures(
            QtWidgets.QDockWidget.DockWidgetClosable |
            QtWidgets.QDockWidget.DockWidgetFloatable
        )
        self.setAllowedAreas(QtCore.Qt.BottomDockWidgetArea)

        self.view = LogTableView(self)
        self.setWidget(self.view)

        self._init_actions()
        self.visibilityChanged.connect(self.on_visibility_changed)

    def _level_action(self, title: str, tip: str, current: int, slot: Callable[[int], None]) -> QtGui.QAction:
        menu = QtWidgets.QMenu(self)
        group = QtGui.QActionGroup(menu)
        group.setExclusive(True)

        for name, level in LEVEL_NAMES:
            item = menu.addAction(name)
            item.setData(level)
            item.setCheckable(True)
            item.setChecked(level == current)
            group.addAction(item)
        group.triggered.connect(lambda item: slot(item.data()))

        action = QtGui.QAction(title, self)
        action.setToolTip(tip)
        action.setMenu(menu)
        return action

    def _init_actions(self) -> None:
        proxy = self.view.model()

        self.view.addAction(self._level_action(
            'App Level', 'Set application logging level',
            logging.getLogger().level, log.set_logging_level
        ))
        self.view.addAction(self._level_action(
            'View Filter', 'Filter view by minimum logging level',
            proxy.filter_level(), proxy.set_filter_level
        ))

        action = QtGui.QAction('Clear Logs', self)
        action.setToolTip('Clear all log entries')
        action.triggered.connect(proxy.sourceModel().clear_logs)
        self.view.addAction(action)

    @QtCore.Slot()
    def toggle(self) -> None:
        """Show and raise the dock if hidden, hide it otherwise."""
        if self.isVisible():
            self.hide()
            return
        self.show()
        self.raise_()

    @QtCore.Slot(bool)
    def on_visibility_changed(self, visible: bool) -> None:
        model = self.view.model().sourceModel()
        if not visible:
            model.pause()
            return
        model.resume()
        model.fetch_new_logs()
