"""
Tests for StudentExpenses.data.store: the initialise / add / delete / filter
commands, the submission guard and the request signals wired to the store.
"""
import datetime
import sqlite3
from unittest.mock import patch

from StudentExpenses.core.database import DatabaseAPI, Table
from StudentExpenses.data import state as st
from StudentExpenses.data import store
from StudentExpenses.data.filter import DateFilter
from StudentExpenses.settings import lib
from StudentExpenses.status import status
from StudentExpenses.ui.actions import signals
from tests.base import BaseTestCase, mute_ui_signals, new_expense


class ExpenseStoreTests(BaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.store = store.store
        self.snapshots = []
        self.store.stateChanged.connect(self.snapshots.append)
        self.store.initialize()

    def fill_form(self, amount='', category='', note=''):
        self.store.set_field('amount', amount)
        self.store.set_field('category', category)
        self.store.set_field('note', note)

    def test_initialize_creates_table_and_loads(self):
        self.assertTrue(DatabaseAPI.table_exists())
        self.assertEqual(self.store.state.expenses, ())
        self.assertIsInstance(self.snapshots[-1], st.ViewState)

    def test_add_expense(self):
        self.fill_form('12.50', 'Food', '')
        self.assertTrue(self.store.add())

        state = self.store.state
        self.assertEqual(len(state.expenses), 1)
        e = state.expenses[0]
        self.assertEqual(e.amount, 12.5)
        self.assertEqual(e.category, 'Food')
        self.assertIsNone(e.note)
        self.assertEqual(e.date, datetime.date.today())

        self.assertEqual(state.form, st.FormState())
        self.assertFalse(state.busy)

        for date_filter in (DateFilter.All, DateFilter.Week, DateFilter.Month):
            self.store.set_filter(date_filter)
            self.assertEqual(self.store.state.visible()[0], e)

    def test_new_expense_is_listed_first(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today() - datetime.timedelta(days=3)))
        self.store.load()

        self.fill_form('1', 'Bus')
        self.store.add()
        self.assertEqual(self.store.state.expenses[0].category, 'Bus')
        self.assertEqual(len(self.store.state.expenses), 2)

    def test_invalid_amount_keeps_form(self):
        self.fill_form('abc', 'Food', 'x')
        with mute_ui_signals():
            self.assertFalse(self.store.add())

        self.assertEqual(self.store.state.form, st.FormState('abc', 'Food', 'x'))
        self.assertFalse(self.store.state.busy)
        self.assertEqual(DatabaseAPI.expenses(), [])

    def test_failure_is_logged_once(self):
        self.fill_form('abc', 'Food')
        with mute_ui_signals():
            with self.assertLogs(level='ERROR') as logs:
                self.store.add()
        self.assertEqual(len(logs.records), 1)

    def test_missing_category_keeps_form(self):
        self.fill_form('5', '   ')
        with mute_ui_signals():
            self.assertFalse(self.store.add())
        self.assertEqual(self.store.state.form.amount, '5')
        self.assertEqual(DatabaseAPI.expenses(), [])

    def test_submit_is_ignored_while_busy(self):
        self.fill_form('3', 'Food')
        self.store.dispatch(st.SubmitStarted())

        self.assertFalse(self.store.add())
        self.assertEqual(DatabaseAPI.expenses(), [])
        self.assertTrue(self.store.state.busy)

    def test_busy_is_set_during_submit(self):
        seen = []
        self.store.stateChanged.connect(lambda s: seen.append(s.busy))

        self.fill_form('3', 'Food')
        seen.clear()
        self.store.add()
        self.assertEqual(seen[0], True)
        self.assertEqual(seen[-1], False)

    def test_database_failure_on_add(self):
        def fail(expense):
            raise status.DatabaseErrorException('disk I/O error')

        self.fill_form('3', 'Food')
        with patch.object(DatabaseAPI, 'add_expense', side_effect=fail):
            with mute_ui_signals():
                self.assertFalse(self.store.add())

        self.assertFalse(self.store.state.busy)
        self.assertEqual(self.store.state.form.amount, '3')
        self.assertEqual(self.store.state.expenses, ())

    def test_delete_expense(self):
        a = DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        b = DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        self.store.load()

        self.assertTrue(self.store.delete(a.id))
        self.assertEqual([e.id for e in self.store.state.expenses], [b.id])

        self.assertFalse(self.store.delete(a.id))
        self.assertEqual([e.id for e in self.store.state.expenses], [b.id])

    def test_filter(self):
        today = datetime.date.today()
        DatabaseAPI.add_expense(new_expense(category='recent', date=today))
        DatabaseAPI.add_expense(new_expense(category='old', date=today - datetime.timedelta(days=20)))
        self.store.load()

        self.store.set_filter('week')
        self.assertEqual(self.store.state.date_filter, DateFilter.Week)
        self.assertEqual([e.category for e in self.store.state.visible()], ['recent'])

        self.store.set_filter('month')
        self.assertEqual([e.category for e in self.store.state.visible()], ['recent', 'old'])

        self.store.set_filter('all')
        self.assertEqual(len(self.store.state.visible()), 2)

    def test_initialize_keeps_rows_by_default(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        self.store.initialize()
        self.assertEqual(len(self.store.state.expenses), 1)

    def test_initialize_with_reset_on_launch(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        with mute_ui_signals():
            lib.settings['reset_on_launch'] = True

        self.store.initialize()
        self.assertEqual(self.store.state.expenses, ())
        self.assertEqual(DatabaseAPI.expenses(), [])

    def test_load_emits_expenses_changed(self):
        calls = []

        def on_changed():
            calls.append(True)

        signals.expensesChanged.connect(on_changed)
        try:
            self.store.load()
        finally:
            signals.expensesChanged.disconnect(on_changed)
        self.assertEqual(calls, [True])

    def test_failed_reload_alerts_and_keeps_list(self):
        DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        self.store.load()
        self.assertEqual(len(self.store.state.expenses), 1)

        conn = sqlite3.connect(lib.settings.db_path)
        try:
            conn.execute(f'ALTER TABLE {Table.Expenses} RENAME TO expenses_old')
            conn.commit()
        finally:
            conn.close()

        alerts = []
        changed = []

        def on_error(message):
            alerts.append(message)

        def on_changed():
            changed.append(True)

        signals.error.connect(on_error)
        signals.expensesChanged.connect(on_changed)
        count = len(self.snapshots)
        try:
            self.store.load()
        finally:
            signals.error.disconnect(on_error)
            signals.expensesChanged.disconnect(on_changed)

        self.assertEqual(alerts, [status.get_message(status.Status.DatabaseError)])
        self.assertEqual(changed, [])
        self.assertEqual(len(self.snapshots), count)
        self.assertEqual(len(self.store.state.expenses), 1)


class StoreSignalTests(BaseTestCase):
    """The request signals of ``signals`` drive whichever store is current."""

    def setUp(self) -> None:
        super().setUp()
        signals.initializationRequested.emit()

    def test_form_and_add_requests(self):
        signals.formFieldChanged.emit('amount', '7.25')
        signals.formFieldChanged.emit('category', 'Books')
        signals.formFieldChanged.emit('note', 'used copy')
        self.assertEqual(store.store.state.form, st.FormState('7.25', 'Books', 'used copy'))

        signals.expenseAddRequested.emit()
        self.assertEqual(store.store.state.form, st.FormState())
        self.assertEqual(store.store.state.expenses[0].note, 'used copy')

    def test_delete_request(self):
        e = DatabaseAPI.add_expense(new_expense(date=datetime.date.today()))
        signals.reloadRequested.emit()
        self.assertEqual(len(store.store.state.expenses), 1)

        signals.expenseDeleteRequested.emit(e.id)
        self.assertEqual(store.store.state.expenses, ())

    def test_filter_request(self):
        signals.dateFilterChanged.emit('month')
        self.assertEqual(store.store.state.date_filter, DateFilter.Month)
