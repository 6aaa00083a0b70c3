"""Masking and display-formatting helpers for identity material in logs or UIs.

These are pure functions. They never raise: malformed or non-string input
collapses to a fixed placeholder instead.
"""

import string

USERNAME_VISIBLE_CHARS = 2


def mask_username(username: str | None) -> str:
    """Keep the first two characters of a username and star the rest.

    Example: 'alice01' -> 'al*****'
    """
    if not isinstance(username, str) or not username:
        return "[empty]"
    if len(username) <= USERNAME_VISIBLE_CHARS:
        return "*" * len(username)
    return username[:USERNAME_VISIBLE_CHARS] + "*" * (len(username) - USERNAME_VISIBLE_CHARS)


def mask_email(email: str | None) -> str:
    """Mask the local part of an email, keeping the domain.

    Example: 'tester@example.com' -> 't***r@example.com'. A local part of two
    characters or fewer keeps only its first character.
    """
    if not isinstance(email, str) or "@" not in email:
        return "***"

    local_part, domain = email.split("@", 1)
    if not local_part:
        return "***@" + domain
    if len(local_part) <= 2:
        return f"{local_part[0]}***@{domain}"
    return f"{local_part[0]}***{local_part[-1]}@{domain}"


def mask_credit_card(card_number: str | None) -> str:
    """Show only the last four digits of a card number.

    Example: '4111 1111 1111 1234' -> '**** **** **** 1234'
    """
    if not isinstance(card_number, str) or not card_number:
        return "****"

    digits = "".join(ch for ch in card_number if ch.isdigit())
    if len(digits) < 4:
        return "****"
    return "**** **** **** " + digits[-4:]


def format_phone_number(phone: str | None) -> str:
    """Group the digits of a phone number for display.

    Non-digits are dropped first. Ten digits render as ``dddd-ddd-ddd`` and
    eleven as ``dddd-ddd-dddd``. Any other length comes back as bare digits,
    and blank or missing input as an empty string.

    Example: '091 234 5678' -> '0912-345-678'
    """
    if not isinstance(phone, str):
        return ""
    digits = "".join(ch for ch in phone if ch in string.digits)
    if len(digits) not in (10, 11):
        return digits
    return f"{digits[:4]}-{digits[4:7]}-{digits[7:]}"
