"""Expense list view and its row delegate.

This module provides:
    - ExpenseItemDelegate: paints one expense per row (amount, category, date,
      optional note) with a "✕" delete affordance on the right
    - ExpenseListView: list view bound to the store's snapshots, with a "Delete"
      context action
"""
import logging
from typing import Optional

from PySide6 import QtWidgets, QtGui, QtCore

from . import ui
from .actions import signals
from ..data.model.expense import ExpenseListModel, IdRole, CategoryRole, NoteRole, DateRole
from ..data.state import ViewState

DELETE_GLYPH = '✕'
EMPTY_TEXT = 'No expenses yet'


class ExpenseItemDelegate(QtWidgets.QStyledItemDelegate):
    """Delegate drawing an expense row and handling clicks on its delete button."""

    @staticmethod
    def delete_rect(option_rect: QtCore.QRect) -> QtCore.QRect:
        """Return the hit area of the delete button inside a row rectangle."""
        size = ui.Size.RowHeight(0.8)
        rect = QtCore.QRect(0, 0, size, size)
        rect.moveCenter(option_rect.center())
        rect.moveRight(option_rect.right() - ui.Size.Margin(0.5))
        return rect

    def paint(self, painter: QtGui.QPainter, option: QtWidgets.QStyleOptionViewItem,
              index: QtCore.QModelIndex) -> None:
        selected = option.state & QtWidgets.QStyle.State_Selected
        hover = option.state & QtWidgets.QStyle.State_MouseOver

        painter.save()
        painter.setRenderHint(QtGui.QPainter.Antialiasing)

        o = ui.Size.Indicator(0.5)
        rect = option.rect.adjusted(o, o, -o, -o)

        painter.setPen(QtCore.Qt.NoPen)
        if selected:
            painter.setBrush(ui.Color.Background())
        elif hover:
            painter.setBrush(ui.Color.DarkBackground())
        else:
            painter.setBrush(ui.Color.Transparent())
        r = ui.Size.Indicator(1.5)
        painter.drawRoundedRect(rect, r, r)

        margin = ui.Size.Margin(0.6)
        delete_rect = self.delete_rect(option.rect)
        text_rect = rect.adjusted(margin, 0, -(rect.right() - delete_rect.left()) - margin, 0)

        note = index.data(NoteRole)
        top_rect = QtCore.QRect(text_rect)
        if note:
            top_rect.setHeight(text_rect.height() // 2)
        bottom_rect = QtCore.QRect(text_rect)
        bottom_rect.setTop(top_rect.bottom())

        font = QtGui.QFont(option.font)
        font.setPixelSize(ui.Size.MediumText(1.0))
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(ui.Color.Text())

        amount = index.model().amount_text(index.model().expenses[index.row()])
        metrics = QtGui.QFontMetrics(font)
        amount_width = metrics.horizontalAdvance(amount) + margin
        painter.drawText(top_rect, QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter, amount)

        font.setBold(False)
        painter.setFont(font)
        category_rect = top_rect.adjusted(amount_width, 0, 0, 0)
        painter.drawText(
            category_rect, QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter,
            QtGui.QFontMetrics(font).elidedText(
                index.data(CategoryRole), QtCore.Qt.ElideRight, category_rect.width()
            )
        )

        font.setPixelSize(ui.Size.SmallText(1.0))
        painter.setFont(font)
        painter.setPen(ui.Color.SecondaryText())
        painter.drawText(top_rect, QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter, index.data(DateRole))

        if note:
            painter.setPen(ui.Color.DisabledText())
            painter.drawText(
                bottom_rect, QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter,
                QtGui.QFontMetrics(font).elidedText(note, QtCore.Qt.ElideRight, bottom_rect.width())
            )

        font.setPixelSize(ui.Size.MediumText(1.0))
        painter.setFont(font)
        painter.setPen(ui.Color.Red() if (hover or selected) else ui.Color.DisabledText())
        painter.drawText(delete_rect, QtCore.Qt.AlignCenter, DELETE_GLYPH)

        painter.restore()

    def sizeHint(self, option: QtWidgets.QStyleOptionViewItem, index: QtCore.QModelIndex) -> QtCore.QSize:
        height = ui.Size.RowHeight(1.6) if index.data(NoteRole) else ui.Size.RowHeight(1.2)
        return QtCore.QSize(ui.Size.DefaultWidth(0.5), height)

    def editorEvent(self, event: QtCore.QEvent, model: QtCore.QAbstractItemModel,
                    option: QtWidgets.QStyleOptionViewItem, index: QtCore.QModelIndex) -> bool:
        if (
                event.type() == QtCore.QEvent.MouseButtonRelease and
                event.button() == QtCore.Qt.LeftButton and
                self.delete_rect(option.rect).contains(event.position().toPoint())
        ):
            expense_id = index.data(IdRole)
            logging.debug(f'Delete requested for expense id={expense_id}')
            signals.expenseDeleteRequested.emit(expense_id)
            return True
        return super().editorEvent(event, model, option, index)


class ExpenseListView(QtWidgets.QListView):
    """List of the expenses passing the current date filter, newest first."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('StudentExpensesExpenseListView')

        self.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.setVerticalScrollMode(QtWidgets.QAbstractItemView.ScrollPerPixel)
        self.setUniformItemSizes(False)
        self.setMouseTracking(True)
        self.setContextMenuPolicy(QtCore.Qt.ActionsContextMenu)

        self.setItemDelegate(ExpenseItemDelegate(self))
        self.setModel(ExpenseListModel(parent=self))

        self._init_actions()

    def _init_actions(self) -> None:
        action = QtGui.QAction('Delete', self)
        action.setShortcuts(['Delete', 'Backspace'])
        action.setShortcutContext(QtCore.Qt.WidgetWithChildrenShortcut)
        action.triggered.connect(self.delete_current)
        self.addAction(action)

        action = QtGui.QAction('', self)
        action.setSeparator(True)
        action.setEnabled(False)
        self.addAction(action)

        action = QtGui.QAction('Reload', self)
        action.setShortcut('Ctrl+R')
        action.setShortcutContext(QtCore.Qt.WidgetWithChildrenShortcut)
        action.triggered.connect(signals.reloadRequested)
        self.addAction(action)

    @QtCore.Slot()
    def delete_current(self) -> None:
        """Request deletion of the selected expense."""
        index = self.selectionModel().currentIndex()
        if not index.isValid():
            logging.debug('No expense selected')
            return
        signals.expenseDeleteRequested.emit(index.data(IdRole))

    @QtCore.Slot(object)
    def set_state(self, state: ViewState) -> None:
        """Show the rows of a store snapshot."""
        self.model().set_state(state)
        self.viewport().update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        super().paintEvent(event)
        if self.model().rowCount():
            return

        painter = QtGui.QPainter(self.viewport())
        painter.setPen(ui.Color.DisabledText())
        painter.drawText(self.viewport().rect(), QtCore.Qt.AlignCenter, EMPTY_TEXT)
        painter.end()
