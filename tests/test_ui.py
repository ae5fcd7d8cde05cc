"""
Smoke tests for UI components of StudentExpenses.
Verifies the widgets can be instantiated, follow the store's snapshots, and send
the expected requests when used.
"""
import datetime
import logging
import os
from unittest.mock import patch

from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtTest import QTest

from StudentExpenses.core.database import DatabaseAPI
from StudentExpenses.data import store
from StudentExpenses.data.filter import DateFilter
from StudentExpenses.data.model.expense import (
    AmountRole,
    CategoryRole,
    DateRole,
    ExpenseListModel,
    IdRole,
    NoteRole,
)
from StudentExpenses.settings import lib
from StudentExpenses.ui import ui
from tests.base import BaseTestCase, mute_ui_signals, new_expense


def delete_later(widget: QtWidgets.QWidget) -> None:
    widget.close()
    widget.deleteLater()
    QtCore.QCoreApplication.sendPostedEvents(None, QtCore.QEvent.DeferredDelete)


class UIBaseTestCase(BaseTestCase):
    def setUp(self):
        super().setUp()
        store.store.initialize()

        self.warning = patch.object(QtWidgets.QMessageBox, 'warning').start()

    def tearDown(self):
        patch.stopall()
        super().tearDown()


class TestStyle(UIBaseTestCase):
    def test_sizes(self):
        self.assertEqual(ui.Size.Margin(1.0), 18)
        self.assertEqual(ui.Size.Margin(0.5), 9)

    def test_colors_follow_theme(self):
        with mute_ui_signals():
            lib.settings['theme'] = 'light'
        light = ui.Color.Text()
        with mute_ui_signals():
            lib.settings['theme'] = 'dark'
        dark = ui.Color.Text()
        self.assertIsInstance(light, QtGui.QColor)
        self.assertNotEqual(light, dark)
        self.assertTrue(ui.Color.Text(qss=True).startswith('rgba('))

    def test_init_stylesheet_expands_all_tokens(self):
        qss = ui.init_stylesheet()
        self.assertNotIn('<', qss)
        self.assertIn('rgba(', qss)

    def test_apply_theme(self):
        app = QtWidgets.QApplication.instance()
        with patch.dict(os.environ, {ui.DISABLE_STYLESHEET_ENV: ''}):
            ui.apply_theme()
        self.assertTrue(app.styleSheet())

        app.setStyleSheet('')
        with patch.dict(os.environ, {ui.DISABLE_STYLESHEET_ENV: '1'}):
            ui.apply_theme()
        self.assertEqual(app.styleSheet(), '')


class TestExpenseListModel(UIBaseTestCase):
    def test_roles(self):
        DatabaseAPI.add_expense(new_expense(12.5, 'Food', 'lunch', datetime.date(2025, 3, 1)))
        store.store.load()

        model = ExpenseListModel()
        model.set_state(store.store.state)
        self.assertEqual(model.rowCount(), 1)

        index = model.index(0, 0)
        self.assertIsInstance(index.data(IdRole), int)
        self.assertEqual(index.data(AmountRole), 12.5)
        self.assertEqual(index.data(CategoryRole), 'Food')
        self.assertEqual(index.data(NoteRole), 'lunch')
        self.assertEqual(index.data(DateRole), '2025-03-01')
        self.assertEqual(index.data(QtCore.Qt.DisplayRole), '$12.50  Food')
        self.assertIn('lunch', index.data(QtCore.Qt.ToolTipRole))

    def test_follows_filter(self):
        today = datetime.date.today()
        DatabaseAPI.add_expense(new_expense(category='recent', date=today))
        DatabaseAPI.add_expense(new_expense(category='old', date=today - datetime.timedelta(days=60)))
        store.store.load()

        model = ExpenseListModel()
        store.store.stateChanged.connect(model.set_state)
        model.set_state(store.store.state)
        self.assertEqual(model.rowCount(), 2)

        store.store.set_filter(DateFilter.Month)
        self.assertEqual([e.category for e in model.expenses], ['recent'])

    def test_locale_change_repaints(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        store.store.load()

        model = ExpenseListModel()
        model.set_state(store.store.state)

        changed = []
        model.dataChanged.connect(lambda *args: changed.append(args))
        lib.settings['locale'] = 'en_GB'
        self.assertEqual(len(changed), 1)
        self.assertTrue(model.index(0, 0).data().startswith('£'))


class TestMainWindow(UIBaseTestCase):
    def setUp(self):
        super().setUp()
        from StudentExpenses.ui.main import MainWindow
        self.window = MainWindow()
        self.window.show()

    def tearDown(self):
        delete_later(self.window)
        super().tearDown()

    def test_layout(self):
        self.assertEqual(self.window.heading.text(), lib.settings['name'])
        self.assertFalse(self.window.log_view.isVisible())
        self.assertEqual(self.window.expense_view.model().rowCount(), 0)
        self.assertTrue(self.window.filter_bar.buttons[DateFilter.All].isChecked())
        self.assertFalse(self.window.expense_view.grab().isNull())

    def test_labels(self):
        self.assertEqual(
            self.window.footer.text(),
            "Enter your expenses and they'll be saved locally with SQLite."
        )
        self.assertEqual(
            [b.text() for b in self.window.filter_bar.buttons.values()],
            ['All', 'This Week', 'This Month']
        )

    def test_heading_follows_settings(self):
        lib.settings['name'] = 'Semester budget'
        self.assertEqual(self.window.heading.text(), 'Semester budget')

    def test_log_shortcut_action(self):
        action = next(a for a in self.window.actions() if a.text() == 'Logs')
        self.assertEqual(action.shortcut(), QtGui.QKeySequence('Ctrl+L'))
        action.trigger()
        self.assertTrue(self.window.log_view.isVisible())
        action.trigger()
        self.assertFalse(self.window.log_view.isVisible())

    def test_add_through_form(self):
        form = self.window.form
        QTest.keyClicks(form.editors['amount'], '12.50')
        QTest.keyClicks(form.editors['category'], 'Food')
        self.assertEqual(store.store.state.form.amount, '12.50')

        form.add_button.click()

        self.assertEqual(self.window.expense_view.model().rowCount(), 1)
        index = self.window.expense_view.model().index(0, 0)
        self.assertEqual(index.data(AmountRole), 12.5)
        self.assertIsNone(index.data(NoteRole))
        self.assertEqual(index.data(DateRole), datetime.date.today().strftime('%Y-%m-%d'))

        for editor in form.editors.values():
            self.assertEqual(editor.text(), '')
        self.assertTrue(form.add_button.isEnabled())

    def test_invalid_input_shows_warning(self):
        form = self.window.form
        QTest.keyClicks(form.editors['amount'], 'abc')
        QTest.keyClicks(form.editors['category'], 'Food')
        form.add_button.click()
        QtWidgets.QApplication.processEvents()

        self.warning.assert_called()
        self.assertEqual(self.warning.call_args.args[2], 'Please enter a valid amount')
        self.assertEqual(form.editors['amount'].text(), 'abc')
        self.assertEqual(self.window.expense_view.model().rowCount(), 0)

    def test_filter_bar(self):
        today = datetime.date.today()
        DatabaseAPI.add_expense(new_expense(category='recent', date=today))
        DatabaseAPI.add_expense(new_expense(category='older', date=today - datetime.timedelta(days=10)))
        store.store.load()
        self.assertEqual(self.window.expense_view.model().rowCount(), 2)

        self.window.filter_bar.buttons[DateFilter.Week].click()
        self.assertEqual(store.store.state.date_filter, DateFilter.Week)
        self.assertEqual(self.window.expense_view.model().rowCount(), 1)

        self.window.filter_bar.buttons[DateFilter.All].click()
        self.assertEqual(self.window.expense_view.model().rowCount(), 2)

    def test_delete_current(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        store.store.load()

        view = self.window.expense_view
        view.setCurrentIndex(view.model().index(0, 0))
        action = next(a for a in view.actions() if a.text() == 'Delete')
        action.trigger()

        self.assertEqual(view.model().rowCount(), 0)
        self.assertEqual(DatabaseAPI.expenses(), [])

    def test_delete_button(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        store.store.load()

        view = self.window.expense_view
        delegate = view.itemDelegate()
        index = view.model().index(0, 0)

        option = QtWidgets.QStyleOptionViewItem()
        option.rect = QtCore.QRect(0, 0, 400, 54)
        pos = QtCore.QPointF(delegate.delete_rect(option.rect).center())

        # A click outside the button does nothing
        event = QtGui.QMouseEvent(
            QtCore.QEvent.MouseButtonRelease, QtCore.QPointF(10, 10), QtCore.QPointF(10, 10),
            QtCore.Qt.LeftButton, QtCore.Qt.LeftButton, QtCore.Qt.NoModifier
        )
        delegate.editorEvent(event, view.model(), option, index)
        self.assertEqual(len(DatabaseAPI.expenses()), 1)

        event = QtGui.QMouseEvent(
            QtCore.QEvent.MouseButtonRelease, pos, pos,
            QtCore.Qt.LeftButton, QtCore.Qt.LeftButton, QtCore.Qt.NoModifier
        )
        self.assertTrue(delegate.editorEvent(event, view.model(), option, index))
        self.assertEqual(DatabaseAPI.expenses(), [])
        self.assertEqual(view.model().rowCount(), 0)


class TestLogDock(UIBaseTestCase):
    def test_actions(self):
        from StudentExpenses.log.view import LogDockWidget
        dock = LogDockWidget()
        try:
            titles = [a.text() for a in dock.view.actions()]
            self.assertEqual(titles, ['App Level', 'View Filter', 'Clear Logs'])

            dock.view.actions()[-1].trigger()
            self.assertEqual(dock.view.model().sourceModel().rowCount(), 0)
        finally:
            delete_later(dock)

    def test_view_filter_menu(self):
        from StudentExpenses.log.view import LogDockWidget
        dock = LogDockWidget()
        try:
            menu = dock.view.actions()[1].menu()
            error = next(a for a in menu.actions() if a.text() == 'Error')
            error.trigger()
            self.assertEqual(dock.view.model().filter_level(), logging.ERROR)
            self.assertTrue(error.isChecked())
        finally:
            delete_later(dock)
