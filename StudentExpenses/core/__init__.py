"""
Core package for StudentExpenses.

This package includes:

- :mod:`StudentExpenses.core.database` – Local SQLite storage of the recorded expenses.
"""
