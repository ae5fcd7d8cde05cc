"""Settings library for the application configuration.

Provides:
    - Schema validation and enforcement for the settings.json structure.
    - Application paths for templates, the user config directory and the expense database.
    - Loading, saving, and reverting application settings.
"""

import json
import logging
import pathlib
import shutil
from typing import Dict, Any, Optional, List

from PySide6 import QtCore, QtWidgets

from ..status import status

app_name: str = 'StudentExpenses'

THEMES: List[str] = ['light', 'dark']

SETTINGS_KEYS: List[str] = [
    'name',
    'locale',
    'theme',
    'reset_on_launch',
]

SETTINGS_SCHEMA: Dict[str, Any] = {
    'name': {'type': str, 'required': True},
    'locale': {'type': str, 'required': True},
    'theme': {'type': str, 'required': True, 'allowed_values': THEMES},
    'reset_on_launch': {'type': bool, 'required': True},
}


def _validate_value(key: str, value: Any) -> None:
    """Validate a single settings value against SETTINGS_SCHEMA.

    Args:
        key: Settings key.
        value: Value to validate.

    Raises:
        KeyError: If key is not defined in the schema.
        TypeError: If the value is not of the expected type.
        ValueError: If the value is not one of the allowed values.
    """
    if key not in SETTINGS_SCHEMA:
        raise KeyError(f'Invalid settings key: {key}, must be one of {SETTINGS_KEYS}')

    specs = SETTINGS_SCHEMA[key]
    if not isinstance(value, specs['type']):
        msg = f'Settings key "{key}" must be {specs["type"]}, got {type(value)}.'
        logging.error(msg)
        raise TypeError(msg)

    allowed = specs.get('allowed_values')
    if allowed and value not in allowed:
        msg = f'Settings key "{key}" must be one of {allowed}, got "{value}".'
        logging.error(msg)
        raise ValueError(msg)


class ConfigPaths:
    """Manage application file paths and ensure default templates and directories exist.

    This class initializes paths for the configuration template, stylesheet, the
    user settings file and the expense database. It verifies the presence of template
    assets and copies the default settings into the user data directory.
    """

    def __init__(self) -> None:
        # Set the application name and organization
        QtWidgets.QApplication.setApplicationName(app_name)
        QtWidgets.QApplication.setOrganizationName('')
        logging.debug(f'Setting application name: {app_name}')

        # Get the app data directory
        p = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.AppDataLocation)
        app_data_dir = pathlib.Path(p)
        logging.debug(f'Using app data directory: {app_data_dir}')

        self.template_dir: pathlib.Path = pathlib.Path(__file__).parent.parent / 'config'
        self.settings_template: pathlib.Path = self.template_dir / 'settings.json.template'
        self.stylesheet_path: pathlib.Path = self.template_dir / 'stylesheet.qss'

        self.config_dir: pathlib.Path = app_data_dir / 'config'
        self.db_dir: pathlib.Path = self.config_dir / 'db'

        self.settings_path: pathlib.Path = self.config_dir / 'settings.json'
        self.db_path: pathlib.Path = self.db_dir / 'expenses.db'

        self._verify_and_prepare()

    def _verify_and_prepare(self) -> None:
        """Verify templates exist and prepare configuration directories and files.

        Raises:
            FileNotFoundError: If the template directory or settings template is missing.
        """
        logging.debug(f'Verifying required directories and templates in {self.template_dir}')
        if not self.template_dir.exists():
            msg: str = f'Missing template directory: {self.template_dir}'
            logging.error(msg)
            raise FileNotFoundError(msg)
        if not self.settings_template.exists():
            msg = f'Missing settings template: {self.settings_template}'
            logging.error(msg)
            raise FileNotFoundError(msg)

        if not self.config_dir.exists():
            logging.debug(f'Creating config directory: {self.config_dir}')
            self.config_dir.mkdir(parents=True, exist_ok=True)

        if not self.db_dir.exists():
            logging.debug(f'Creating db directory: {self.db_dir}')
            self.db_dir.mkdir(parents=True, exist_ok=True)

        # Ensure a valid settings file exists even before the user changes anything
        if not self.settings_path.exists():
            logging.debug(f'Copying default settings from template to {self.settings_path}')
            shutil.copy(self.settings_template, self.settings_path)

    def revert_settings_to_template(self) -> None:
        """Restore settings.json from the default template file.

        Raises:
            FileNotFoundError: If the settings template file is missing.
        """
        logging.debug(f'Reverting settings to template: {self.settings_template}')
        if not self.settings_template.exists():
            msg: str = f'Settings template not found: {self.settings_template}'
            logging.error(msg)
            raise FileNotFoundError(msg)
        shutil.copy(self.settings_template, self.settings_path)


class SettingsAPI(ConfigPaths):
    """
    Provides an interface to get/set/revert/save the values stored in settings.json.
    """

    def __init__(self, settings_path: Optional[str] = None) -> None:
        """Initialize SettingsAPI and load the settings data.

        Args:
            settings_path: Optional path to a custom settings.json file.
        """
        super().__init__()

        self.settings_path: pathlib.Path = pathlib.Path(settings_path) if settings_path else self.settings_path

        self._signals_blocked: bool = False
        self.data: Dict[str, Any] = {}

        self.load()

    def __getitem__(self, key: str) -> Any:
        """Retrieve a settings value using dictionary-style access.

        Args:
            key: Settings key to retrieve.

        Returns:
            Value stored for the key, or None if the stored value has the wrong type.

        Raises:
            KeyError: If key is not in SETTINGS_KEYS.
        """
        if key not in SETTINGS_KEYS:
            raise KeyError(f'Invalid settings key: {key}, must be one of {SETTINGS_KEYS}')

        _type = SETTINGS_SCHEMA[key]['type']
        v = self.data.get(key)

        if not isinstance(v, _type):
            logging.error(f'Settings key "{key}" is not of type {_type}, got {type(v)}.')
            return None

        return v

    def __setitem__(self, key: str, value: Any) -> None:
        """Assign a settings value using dictionary-style access and persist it.

        Args:
            key: Settings key to set.
            value: Value to assign.

        Raises:
            KeyError: If key is not in SETTINGS_KEYS.
            ValueError: If the value cannot be converted or is not allowed.
        """
        if key not in SETTINGS_KEYS:
            raise KeyError(f'Invalid settings key: {key}, must be one of {SETTINGS_KEYS}')

        _type = SETTINGS_SCHEMA[key]['type']
        if not isinstance(value, _type):
            logging.warning(f'Settings key "{key}" is not of type {_type}, got {type(value)}.')

            # Try to convert to the expected type
            if _type == str:
                value = str(value)
            elif _type == bool:
                value = bool(value)

        _validate_value(key, value)

        self.data[key] = value
        self.save()

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        signals.settingChanged.emit(key, value)

    def block_signals(self, v: bool) -> None:
        """Enable or disable emission of settings change signals.

        Args:
            v: True to block signals, False to allow signals to emit.
        """
        self._signals_blocked = v

    def load(self) -> Dict[str, Any]:
        """Load settings.json from disk and validate against schema.

        Returns:
            The loaded settings dictionary.

        Raises:
            status.SettingsNotFoundException: If settings.json file is missing.
            status.SettingsInvalidException: If JSON parsing or validation fails.
        """
        logging.debug(f'Loading settings from "{self.settings_path}"')
        if not self.settings_path.exists():
            raise status.SettingsNotFoundException

        try:
            with self.settings_path.open('r', encoding='utf-8') as f:
                data: Dict[str, Any] = json.load(f)
            self.validate(data)
        except (ValueError, TypeError, KeyError) as ex:
            raise status.SettingsInvalidException(str(ex)) from ex

        self.data = data
        return self.data

    def validate(self, data: Dict[str, Any] = None) -> None:
        """Validate settings data against SETTINGS_SCHEMA.

        Args:
            data (dict, optional): Settings data to validate. Defaults to self.data.

        Raises:
            TypeError: If data is not a dict or a value has the wrong type.
            ValueError: If a required key is missing or a value is not allowed.
        """
        if data is None:
            data = self.data
        if not isinstance(data, dict):
            raise TypeError(f'Settings must be a dict, got {type(data)}.')

        logging.debug('Validating settings data against schema.')
        for key, specs in SETTINGS_SCHEMA.items():
            if specs.get('required') and key not in data:
                raise ValueError(f'Missing required settings key: {key}')
            if key not in data:
                continue
            _validate_value(key, data[key])

        logging.debug('Settings data is valid.')

    def save(self) -> None:
        """Persist the current settings to settings.json.

        Raises:
            TypeError, ValueError: If the current data does not validate.
        """
        logging.debug(f'Saving settings to "{self.settings_path}"')
        self.validate()
        with self.settings_path.open('w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=4, ensure_ascii=False)

    def revert(self) -> None:
        """Revert all settings to the template defaults and reload them."""
        self.revert_settings_to_template()
        self.load()

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        for k, v in self.data.items():
            signals.settingChanged.emit(k, v)


settings: SettingsAPI = SettingsAPI()
