"""The QApplication used by StudentExpenses."""
import sys
from typing import Optional, Sequence

from PySide6 import QtWidgets


class Application(QtWidgets.QApplication):
    """QApplication carrying the package metadata and the configured theme.

    The display name follows the ``name`` setting, so it matches the heading of
    the main window.
    """

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        super().__init__(list(sys.argv if argv is None else argv))

        from .. import __version__
        from ..settings import lib
        from . import ui

        self.setApplicationName(lib.app_name)
        self.setApplicationDisplayName(lib.settings['name'] or lib.app_name)
        self.setApplicationVersion(__version__)
        self.setQuitOnLastWindowClosed(True)

        ui.apply_theme()
