"""Qt item models for the StudentExpenses application.

This subpackage provides the list model (ExpenseListModel) that exposes the
filtered expense rows of the current store snapshot to Qt views.
"""
