"""Test package.

Qt is switched to headless mode and QStandardPaths to test mode before any
StudentExpenses module is imported, so the settings file and the expense
database are created under the test locations rather than the user's data.
"""
import os

from PySide6 import QtCore

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
os.environ.setdefault('STUDENTEXPENSES_DISABLE_STYLESHEET', '1')

QtCore.QStandardPaths.setTestModeEnabled(True)
