"""UI styling utilities for StudentExpenses.

This module provides:
    - Theme: supported UI themes (light, dark)
    - Size: size constants with multiplier scaling
    - Color: the two-theme palette shared by painted widgets and the style sheet
    - init_stylesheet / apply_theme: style sheet token expansion and application
"""
import enum
import logging
import os
import re
from typing import Dict, Union

from PySide6 import QtWidgets, QtGui

DISABLE_STYLESHEET_ENV = 'STUDENTEXPENSES_DISABLE_STYLESHEET'

re_token = re.compile(r'<([A-Za-z]+)(?:@([0-9]+(?:\.[0-9]+)?))?>')


class Theme(enum.StrEnum):
    Light = 'light'
    Dark = 'dark'


class Size(enum.Enum):
    """Pixel sizes used across the UI.

    Members are callable with a multiplier, e.g. ``Size.Margin(0.5)``.
    """
    SmallText = 11.0
    MediumText = 12.0
    HeadingText = 22.0
    Indicator = 4.0
    Separator = 1.0
    Margin = 18.0
    RowHeight = 34.0
    DefaultWidth = 420.0
    DefaultHeight = 640.0

    def __call__(self, multiplier: float = 1.0) -> int:
        return round(self.value * float(multiplier))


class Color(enum.Enum):
    """Palette entries as ``(light, dark)`` RGB(A) tuples."""
    Transparent = ((0, 0, 0, 0), (0, 0, 0, 0))
    VeryDarkBackground = ((248, 247, 244), (24, 26, 29))
    DarkBackground = ((236, 234, 229), (34, 37, 41))
    Background = ((218, 215, 208), (48, 52, 58))
    LightBackground = ((196, 192, 184), (66, 71, 79))
    DisabledText = ((140, 136, 128), (118, 124, 132))
    SecondaryText = ((92, 88, 82), (168, 174, 182))
    Text = ((36, 34, 31), (226, 229, 233))
    SelectedText = ((0, 0, 0), (255, 255, 255))
    Blue = ((38, 98, 170), (96, 154, 222))
    Red = ((186, 64, 58), (232, 106, 98))
    Green = ((46, 140, 92), (86, 190, 134))

    @staticmethod
    def theme() -> Theme:
        """Return the theme set in the settings, falling back to dark."""
        from ..settings import lib
        try:
            return Theme(lib.settings['theme'])
        except ValueError:
            return Theme.Dark

    def __call__(self, qss: bool = False) -> Union[QtGui.QColor, str]:
        """Return the colour for the current theme.

        Args:
            qss (bool): Return a ``rgba(...)`` string instead of a QColor.

        """
        light, dark = self.value
        color = QtGui.QColor(*(light if self.theme() == Theme.Light else dark))
        if qss:
            return self.rgb(color)
        return color

    @staticmethod
    def rgb(color: QtGui.QColor) -> str:
        return f'rgba({",".join(str(f) for f in color.getRgb())})'


def _token_value(name: str, multiplier: str) -> str:
    if multiplier is None:
        if name not in Color.__members__:
            raise KeyError(f'Unknown colour token: <{name}>')
        return Color[name](qss=True)

    if name not in Size.__members__:
        raise KeyError(f'Unknown size token: <{name}@{multiplier}>')
    return str(Size[name](float(multiplier)))


def init_stylesheet() -> str:
    """Load and expand the application style sheet.

    The template is ``config/stylesheet.qss``. It may reference palette entries
    as ``<Text>`` and sizes as ``<Margin@0.5>``.

    Returns:
        str: The expanded style sheet.

    Raises:
        FileNotFoundError: If the template is missing.
        KeyError: If the template references an unknown token.

    """
    from ..settings import lib

    path = lib.settings.stylesheet_path
    if not path.is_file():
        raise FileNotFoundError(f'Style sheet file not found: {path}')

    with path.open('r', encoding='utf-8') as f:
        qss = f.read()

    cache: Dict[str, str] = {}

    def replace(match: re.Match) -> str:
        key = match.group(0)
        if key not in cache:
            cache[key] = _token_value(match.group(1), match.group(2))
        return cache[key]

    qss = re_token.sub(replace, qss)
    logging.debug(f'Expanded {len(cache)} style sheet token(s) for the {Color.theme()} theme')
    return qss


def apply_theme() -> None:
    """Set the style sheet of the running application.

    Does nothing when the ``STUDENTEXPENSES_DISABLE_STYLESHEET`` environment
    variable is set to a true value.

    """
    app = QtWidgets.QApplication.instance()
    if not app:
        raise RuntimeError('apply_theme() must be called after a QApplication is initiated.')

    if os.environ.get(DISABLE_STYLESHEET_ENV, '').lower() in ('1', 'true', 'yes'):
        logging.warning('Stylesheet disabled by environment variable.')
        return

    app.setStyleSheet(init_stylesheet())
