"""Pure validation predicates for credentials and identity material."""

from .validators import (
    is_valid_age,
    is_valid_credit_card,
    is_valid_email,
    is_valid_password,
    is_valid_phone_number,
    is_valid_username,
)

__all__ = [
    "is_valid_age",
    "is_valid_credit_card",
    "is_valid_email",
    "is_valid_password",
    "is_valid_phone_number",
    "is_valid_username",
]
