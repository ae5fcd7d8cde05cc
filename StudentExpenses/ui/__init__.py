"""
UI package: application signals, main application setup, theming, and widgets.

This package provides:

- :mod:`StudentExpenses.ui.actions` – Application-wide Qt signals.
- :mod:`StudentExpenses.ui.app` – QApplication subclass.
- :mod:`StudentExpenses.ui.main` – Main window composition.
- :mod:`StudentExpenses.ui.form` – Expense entry form.
- :mod:`StudentExpenses.ui.filterbar` – All / Week / Month filter buttons.
- :mod:`StudentExpenses.ui.view` – Expense list view and row delegate.
- :mod:`StudentExpenses.ui.ui` – Styling constants for sizes and colors, and the style sheet.
"""
