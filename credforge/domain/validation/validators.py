"""Pure validation predicates for identity material.

Every function in this module is a total predicate: it returns ``True`` or
``False`` and never raises. Absent input (``None``) or input of the wrong type
is simply invalid.

Rules:
- Email: ``local@domain.tld`` with a letters-only TLD of at least two
  characters; surrounding spaces and control characters are ignored.
- Password: at least 8 characters with an uppercase letter, a lowercase letter
  and a decimal digit. Special characters are not required.
- Username: 3-20 ASCII letters, digits or underscores.
- Phone number: Vietnamese mobile numbering, ``0`` then ``3``-``9`` then 8 or
  9 more digits.
- Age: 1 to 150 inclusive.
- Credit card: 13-19 ASCII digits passing the Luhn checksum.
"""

import re
import string
from typing import Any, Final

EMAIL_PATTERN: Final[re.Pattern] = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN: Final[re.Pattern] = re.compile(r"0[3-9][0-9]{8,9}")

PASSWORD_MIN_LENGTH: Final = 8
USERNAME_MIN_LENGTH: Final = 3
USERNAME_MAX_LENGTH: Final = 20
USERNAME_ALLOWED_CHARS: Final = frozenset(string.ascii_letters + string.digits + "_")
MIN_AGE: Final = 1
MAX_AGE: Final = 150
CARD_MIN_LENGTH: Final = 13
CARD_MAX_LENGTH: Final = 19

# Space and the ASCII control characters; other Unicode whitespace is kept.
TRIMMABLE_CHARS: Final = "".join(chr(code) for code in range(0x21))

__all__ = [
    "is_valid_email",
    "is_valid_password",
    "is_valid_username",
    "is_valid_phone_number",
    "is_valid_age",
    "is_valid_credit_card",
    "luhn_checksum_ok",
    "trim_input",
]


def trim_input(value: str) -> str:
    """Strip leading and trailing spaces and control characters."""
    return value.strip(TRIMMABLE_CHARS)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not trim_input(value)


def is_valid_email(email: str | None) -> bool:
    """Validate email format.

    Args:
        email: Email to validate

    Returns:
        bool: True if the trimmed value matches ``local@domain.tld``
    """
    if _is_blank(email):
        return False
    return EMAIL_PATTERN.fullmatch(trim_input(email)) is not None


def is_valid_password(password: str | None) -> bool:
    """Validate password composition.

    Requirements: min 8 chars, at least 1 uppercase, 1 lowercase, 1 digit.

    Args:
        password: Password to validate

    Returns:
        bool: True if password meets requirements
    """
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        return False

    has_upper = any(ch.isupper() for ch in password)
    has_lower = any(ch.islower() for ch in password)
    has_digit = any(ch.isdecimal() for ch in password)

    return has_upper and has_lower and has_digit


def is_valid_username(username: str | None) -> bool:
    """Validate username format: 3-20 chars of ASCII letters, digits and underscore."""
    if not isinstance(username, str):
        return False
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        return False
    return all(ch in USERNAME_ALLOWED_CHARS for ch in username)


def is_valid_phone_number(phone: str | None) -> bool:
    """Validate Vietnamese mobile phone number format (10 or 11 digits)."""
    if _is_blank(phone):
        return False
    return PHONE_PATTERN.fullmatch(trim_input(phone)) is not None


def is_valid_age(age: int | None) -> bool:
    """Return True if age is between 1 and 150 inclusive."""
    if not isinstance(age, int) or isinstance(age, bool):
        return False
    return MIN_AGE <= age <= MAX_AGE


def luhn_checksum_ok(digits: str) -> bool:
    """Run the Luhn (mod 10) checksum over a string of ASCII digits.

    Digits are processed right to left; every second digit is doubled and
    reduced by 9 when the result exceeds 9.
    """
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = ord(ch) - 48  # '0' -> 48
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def is_valid_credit_card(card_number: str | None) -> bool:
    """Validate a payment card number using the Luhn algorithm.

    Args:
        card_number: Card number, digits only (no spaces or dashes)

    Returns:
        bool: True if 13-19 ASCII digits that pass the Luhn checksum
    """
    if not isinstance(card_number, str):
        return False
    if not CARD_MIN_LENGTH <= len(card_number) <= CARD_MAX_LENGTH:
        return False
    if any(ch not in string.digits for ch in card_number):
        return False
    return luhn_checksum_ok(card_number)
