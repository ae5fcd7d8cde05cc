"""Expense records and input validation.

An :class:`Expense` is one stored row of the ``expenses`` table. A
:class:`NewExpense` is a validated expense that has not been stored yet; it is
produced from raw form text by :func:`validate_expense`.
"""
import datetime
import math
from dataclasses import dataclass
from typing import Any, Optional

from ..status import status

DATE_FORMAT = '%Y-%m-%d'


@dataclass(frozen=True, slots=True)
class NewExpense:
    """A validated expense waiting to be inserted."""
    amount: float
    category: str
    note: Optional[str]
    date: datetime.date


@dataclass(frozen=True, slots=True)
class Expense:
    """A stored expense row."""
    id: int
    amount: float
    category: str
    note: Optional[str]
    date: datetime.date

    @classmethod
    def from_row(cls, row: Any) -> 'Expense':
        """Build an expense from a row with ``id``, ``amount``, ``category``, ``note`` and ``date`` fields.

        Args:
            row: A named tuple, ``sqlite3.Row`` or mapping.

        Returns:
            Expense: The converted record.
        """
        get = row.__getitem__ if hasattr(row, 'keys') else lambda k: getattr(row, k)

        note = get('note')
        # pandas hands back NaN for NULL in some column dtypes
        if not isinstance(note, str):
            note = None

        return cls(
            id=int(get('id')),
            amount=float(get('amount')),
            category=str(get('category')),
            note=note,
            date=datetime.datetime.strptime(str(get('date')), DATE_FORMAT).date(),
        )

    @property
    def date_str(self) -> str:
        """str: The ISO calendar date as stored in the database."""
        return self.date.strftime(DATE_FORMAT)


def parse_amount(text: str) -> float:
    """Parse the amount entered in the form.

    Args:
        text: Raw amount text, e.g. ``' 12.50 '``.

    Returns:
        float: The parsed amount.

    Raises:
        status.AmountInvalidException: If the text is not a finite number greater than zero.
    """
    text = (text or '').strip()
    try:
        value = float(text)
    except ValueError:
        raise status.AmountInvalidException(f'"{text}" is not a number.') from None

    if not math.isfinite(value) or value <= 0:
        raise status.AmountInvalidException(f'{text} must be greater than zero.')
    return value


def normalise_category(text: str) -> str:
    """Trim the category and make sure it isn't empty.

    Raises:
        status.CategoryInvalidException: If nothing is left after trimming.
    """
    category = (text or '').strip()
    if not category:
        raise status.CategoryInvalidException
    return category


def normalise_note(text: Optional[str]) -> Optional[str]:
    """Return the trimmed note, or None for a blank note."""
    note = (text or '').strip()
    return note or None


def validate_expense(amount: str, category: str, note: Optional[str] = '',
                     today: Optional[datetime.date] = None) -> NewExpense:
    """Validate raw form input and stamp it with the current date.

    The amount is checked before the category, so only the first problem is reported.

    Args:
        amount: Raw amount text.
        category: Raw category text.
        note: Raw note text, optional.
        today: The date to assign. Defaults to the local current date.

    Returns:
        NewExpense: The validated expense.

    Raises:
        status.AmountInvalidException: If the amount is invalid.
        status.CategoryInvalidException: If the category is empty.
    """
    return NewExpense(
        amount=parse_amount(amount),
        category=normalise_category(category),
        note=normalise_note(note),
        date=today or datetime.date.today(),
    )
