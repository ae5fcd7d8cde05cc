"""
StudentExpenses: desktop application for recording and reviewing personal expenses.

This package provides:

- :mod:`StudentExpenses.core` – Local SQLite storage of the recorded expenses.
- :mod:`StudentExpenses.data` – Expense records and validation, date filtering, view-state snapshots, the store and the Qt list model.
- :mod:`StudentExpenses.ui` – A PySide6 UI: entry form, date filter bar, expense list and the main window.
- :mod:`StudentExpenses.settings` – Settings management with schema validation and locale-aware formatting.
- :mod:`StudentExpenses.log` – In-app logging with a log viewer dock.

Use :func:`StudentExpenses.exec_` to launch the application.
"""

import sys

from PySide6 import QtCore

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('StudentExpenses requires Python 3.11 or higher.')

__version__ = '0.1.0'
__license__ = 'GPL-3.0'
__description__ = 'StudentExpenses: desktop application for recording and filtering personal expenses.'

from .log import log

log.setup_logging()


def exec_() -> None:
    """Launch the StudentExpenses GUI application and enter its event loop.

    Initializes the QApplication, shows the main window, and starts the Qt event loop.
    """
    from .ui import app
    from .ui import main
    from .ui.actions import signals
    app = app.Application(sys.argv)
    main.show()

    # Set up storage and load the stored expenses once the window is up
    QtCore.QTimer.singleShot(100, signals.initializationRequested)

    sys.exit(app.exec())


if __name__ == '__main__':
    exec_()
