"""Password strength scoring.

The score is an integer in [0, 100] built from three additive parts and then
capped at 100:

- length bands: +5 below 8 characters, otherwise +10 for >= 8, +10 more for
  >= 12 and +10 more for >= 16;
- character classes: +10 each for uppercase, lowercase, digit and "special"
  (anything else);
- diversity bonus: +15 when at least three classes are present and another
  +15 when all four are.

The score is derived on demand and never stored.
"""

from enum import Enum
from typing import Final

MAX_SCORE: Final = 100
CLASS_SCORE: Final = 10
DIVERSITY_BONUS: Final = 15


class PasswordStrength(str, Enum):
    """Display label for a strength score."""

    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"


def _length_score(length: int) -> int:
    score = 0
    if length < 8:
        score += 5
    if length >= 8:
        score += 10
    if length >= 12:
        score += 10
    if length >= 16:
        score += 10
    return score


def calculate_password_strength(password: str | None) -> int:
    """Calculate password strength score.

    Args:
        password: Password to evaluate

    Returns:
        int: Score from 0 to 100; empty or missing passwords score 0
    """
    if not password:
        return 0

    score = _length_score(len(password))

    has_upper = has_lower = has_digit = has_special = False
    for ch in password:
        if ch.isupper():
            has_upper = True
        elif ch.islower():
            has_lower = True
        elif ch.isdecimal():
            has_digit = True
        else:
            has_special = True

    present = (has_upper, has_lower, has_digit, has_special)
    diversity = sum(present)
    score += CLASS_SCORE * diversity

    if diversity >= 3:
        score += DIVERSITY_BONUS
    if diversity == 4:
        score += DIVERSITY_BONUS

    return min(MAX_SCORE, score)


def classify_password_strength(score: int) -> PasswordStrength:
    """Map a score onto a display label."""
    if score < 40:
        return PasswordStrength.WEAK
    if score < 60:
        return PasswordStrength.FAIR
    if score < 80:
        return PasswordStrength.STRONG
    return PasswordStrength.VERY_STRONG
