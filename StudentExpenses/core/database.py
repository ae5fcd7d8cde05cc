"""
Local SQLite storage for recorded expenses.

This module provides the schema of the ``expenses`` table, the storage setup run
when the screen is mounted, and the three statements the application needs:
insert one expense, select all expenses newest first, and delete one expense by id.
"""

import enum
import logging
import sqlite3
from typing import Dict, List, Optional

import pandas as pd
from PySide6 import QtCore

from ..data.expense import Expense, NewExpense
from ..settings import lib
from ..status import status


class Table(enum.StrEnum):
    """Enum for database tables."""
    Expenses = 'expenses'


EXPENSES_SCHEMA: Dict[str, str] = {
    'id': 'INTEGER PRIMARY KEY AUTOINCREMENT',
    'amount': 'REAL NOT NULL',
    'category': 'TEXT NOT NULL',
    'note': 'TEXT',
    'date': 'TEXT NOT NULL',
}

INSERT_SQL = f'INSERT INTO {Table.Expenses} (amount, category, note, date) VALUES (?, ?, ?, ?)'
SELECT_SQL = f'SELECT * FROM {Table.Expenses} ORDER BY date DESC'
DELETE_SQL = f'DELETE FROM {Table.Expenses} WHERE id = ?'


def create_table_sql() -> str:
    """Return the CREATE TABLE statement for the expenses table."""
    cols_sql = ', '.join(f'{name} {typedef}' for name, typedef in EXPENSES_SCHEMA.items())
    return f'CREATE TABLE IF NOT EXISTS {Table.Expenses} ({cols_sql})'


class DatabaseAPI(QtCore.QObject):
    """Database API for the expense data. Handles schema setup and data access."""

    @classmethod
    def connection(cls) -> sqlite3.Connection:
        """Return a new connection to the expense database.

        Returns:
            sqlite3.Connection: Database connection object.
        """
        lib.settings.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(lib.settings.db_path), timeout=2.0)
        conn.set_progress_handler(lambda: logging.debug('Waiting on DB lock…'), 1000)
        return conn

    @classmethod
    def setup(cls, reset: bool = False) -> None:
        """Prepare the expenses table when the screen is mounted.

        Args:
            reset: Drop the table, and every stored expense with it, before creating it.

        Raises:
            status.DatabaseErrorException: If the schema cannot be created.
        """
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = cls.connection()
            if reset:
                logging.warning(f'Dropping table "{Table.Expenses}": all stored expenses are discarded.')
                conn.execute(f'DROP TABLE IF EXISTS {Table.Expenses}')
            conn.execute(create_table_sql())
            conn.commit()
            logging.debug(f'Table "{Table.Expenses}" is ready at {lib.settings.db_path}')
        except sqlite3.Error as e:
            logging.error(f'SQLite error during schema setup: {e}', exc_info=True)
            raise status.DatabaseErrorException(f'Could not set up the database: {e}') from e
        finally:
            if conn:
                conn.close()

    @classmethod
    def reset(cls) -> None:
        """Drop and recreate the expenses table."""
        cls.setup(reset=True)

    @classmethod
    def table_exists(cls, table_name: str = Table.Expenses) -> bool:
        """Check if a table exists in the database."""
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = cls.connection()
            cursor = conn.execute(
                """SELECT name FROM sqlite_master WHERE type='table' AND name=?""",
                (str(table_name),)
            )
            return cursor.fetchone() is not None
        finally:
            if conn:
                conn.close()

    @classmethod
    def add_expense(cls, expense: NewExpense) -> Expense:
        """Insert a validated expense.

        Args:
            expense: The expense to store.

        Returns:
            Expense: The stored row with its assigned id.

        Raises:
            status.DatabaseErrorException: If the insert fails.
        """
        logging.debug(f'Adding expense: {expense}')

        conn: Optional[sqlite3.Connection] = None
        try:
            conn = cls.connection()
            cursor = conn.execute(
                INSERT_SQL,
                (expense.amount, expense.category, expense.note, expense.date.strftime('%Y-%m-%d'))
            )
            conn.commit()
            expense_id = cursor.lastrowid
        except sqlite3.Error as e:
            raise status.DatabaseErrorException(f'Could not add the expense: {e}') from e
        finally:
            if conn:
                conn.close()

        logging.debug(f'Expense added successfully (id={expense_id})')
        return Expense(
            id=expense_id,
            amount=expense.amount,
            category=expense.category,
            note=expense.note,
            date=expense.date,
        )

    @classmethod
    def data(cls) -> pd.DataFrame:
        """Return all stored expenses, newest date first.

        Returns:
            pd.DataFrame: One row per expense with the schema columns.

        Raises:
            status.DatabaseErrorException: If the expenses cannot be read.
        """
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = cls.connection()
            return pd.read_sql_query(SELECT_SQL, conn)
        except (sqlite3.Error, pd.errors.DatabaseError) as e:
            raise status.DatabaseErrorException(f'Could not read the expenses: {e}') from e
        finally:
            if conn:
                conn.close()

    @classmethod
    def expenses(cls) -> List[Expense]:
        """Return all stored expenses as records, newest date first.

        Raises:
            status.DatabaseErrorException: If the expenses cannot be read.
        """
        df = cls.data()
        return [Expense.from_row(row) for row in df.itertuples(index=False)]

    @classmethod
    def delete_expense(cls, expense_id: int) -> int:
        """Delete one expense.

        Args:
            expense_id: Id of the row to delete.

        Returns:
            int: Number of rows removed, 0 if no row had that id.

        Raises:
            status.DatabaseErrorException: If the delete fails.
        """
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = cls.connection()
            cursor = conn.execute(DELETE_SQL, (int(expense_id),))
            conn.commit()
            count = cursor.rowcount
        except sqlite3.Error as e:
            raise status.DatabaseErrorException(f'Could not delete expense {expense_id}: {e}') from e
        finally:
            if conn:
                conn.close()

        logging.debug(f'Deleted expense id={expense_id} ({count} row(s))')
        return count


database: DatabaseAPI = DatabaseAPI()
