"""Status definitions and exceptions for StudentExpenses.

This module provides:
    - Status: enumeration of possible application states
    - STATUS_MESSAGE: user-facing messages for each status
    - get_message: retrieve the message for a status
    - BaseStatusException: base exception carrying a Status
    - Specific exceptions (e.g., AmountInvalidException) for validation and storage errors
"""
import enum
import logging
from typing import Dict


class Status(enum.StrEnum):
    """Enumeration of application status codes."""
    UnknownStatus = enum.auto()

    # Config status
    SettingsNotFound = enum.auto()
    SettingsInvalid = enum.auto()

    # Validation status
    AmountInvalid = enum.auto()
    CategoryInvalid = enum.auto()

    # Storage status
    DatabaseError = enum.auto()


STATUS_MESSAGE: Dict[Status, str] = {
    Status.UnknownStatus: 'Something went wrong.',

    Status.SettingsNotFound: 'Could not find the settings file.',
    Status.SettingsInvalid: 'The settings file seems to be incomplete, or contains invalid values.',

    Status.AmountInvalid: 'Please enter a valid amount',
    Status.CategoryInvalid: 'Please enter a category',

    Status.DatabaseError: 'Could not access the expense database.',
}


def get_message(status: Status) -> str:
    """
    Get the message for a given status.

    Args:
        status (Status): The status enum.

    Returns:
        str: The message associated with the status.
    """
    return STATUS_MESSAGE.get(status, 'Unknown status')


class BaseStatusException(Exception):
    """Base exception for status-based errors in StudentExpenses.

    Attributes:
        status (Status): Status code associated with this error.
        status_message (str): User-facing message for the status.

    Args:
        message (str): Optional additional context for the error.
    """
    status = Status.UnknownStatus

    def __init__(self, message: str = None):
        self.status_message = get_message(self.status)
        exception_message = f'{self.status_message}: {message}' if message else self.status_message
        super().__init__(exception_message)

        logging.error(exception_message)

        # Alerts show the status message only, the detail is logged
        from ..ui.actions import signals
        signals.error.emit(self.status_message)


class SettingsNotFoundException(BaseStatusException):
    """Exception raised when the settings file cannot be found."""
    status = Status.SettingsNotFound


class SettingsInvalidException(BaseStatusException):
    """Exception raised when the settings file is invalid or malformed."""
    status = Status.SettingsInvalid


class AmountInvalidException(BaseStatusException):
    """Exception raised when an amount is not a positive number."""
    status = Status.AmountInvalid


class CategoryInvalidException(BaseStatusException):
    """Exception raised when a category is empty."""
    status = Status.CategoryInvalid


class DatabaseErrorException(BaseStatusException):
    """Exception raised when a call to the local expense database fails."""
    status = Status.DatabaseError
