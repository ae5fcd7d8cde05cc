"""
Module for formatting decimal and currency values using Babel.

"""
import logging

from babel import Locale, numbers
from babel.core import UnknownLocaleError

CURRENCY_MAP: dict[str, str] = {
    'US': 'USD',
    'GB': 'GBP',
    'DE': 'EUR',
    'FR': 'EUR',
    'IT': 'EUR',
    'ES': 'EUR',
    'NL': 'EUR',
    'FI': 'EUR',
    'JP': 'JPY',
    'CA': 'CAD',
    'AU': 'AUD',
    'IN': 'INR',
    'BR': 'BRL',
    'DK': 'DKK',
    'SE': 'SEK',
    'NO': 'NOK',
    'HU': 'HUF',
    'MX': 'MXN',
}


def get_currency_from_locale(locale: str) -> str:
    """
    Retrieve the default currency code based on the locale's territory.

    Args:
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: Currency code such as 'EUR'. Defaults to 'USD' if the territory is unknown.
    """
    parts = locale.split('_')
    if len(parts) < 2:
        return 'USD'
    return CURRENCY_MAP.get(parts[1], 'USD')


def format_currency_value(value: float, locale: str) -> str:
    """
    Format a float as a currency string based on the locale's default currency.

    Args:
        value (float): The numeric value to be formatted.
        locale (str): Locale string, e.g. 'en_US'.

    Returns:
        str: The formatted currency string, or the value with two decimals if the
        locale cannot be parsed.
    """
    try:
        currency_code = get_currency_from_locale(locale)
        locale_obj = Locale.parse(locale)
        return numbers.format_currency(value, currency=currency_code, locale=locale_obj)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logging.debug(f'Error formatting currency: {e}')
        return f'{value:.2f}'
