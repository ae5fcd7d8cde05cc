"""
StudentExpenses data package: expense records, filtering, view state and models.

This package provides:

- :mod:`StudentExpenses.data.expense` – :class:`Expense` records and validation of the form input.
- :mod:`StudentExpenses.data.filter` – Memoised all / week / month date filtering.
- :mod:`StudentExpenses.data.state` – Immutable view-state snapshots and their reducer.
- :mod:`StudentExpenses.data.store` – The store turning UI requests into database commands and new snapshots.
- :mod:`StudentExpenses.data.model` – The Qt list model exposing the filtered expenses.
"""
