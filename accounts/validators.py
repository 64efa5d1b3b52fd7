"""
Accounts app validators

Username rules shared by signup and profile updates.
"""
import re

from django.core.exceptions import ValidationError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
USERNAME_PATTERN = re.compile(r'^[a-z0-9_-]+$')


def normalize_username(value: str) -> str:
    """
    Normalize and validate a public username.

    Raises:
        ValidationError: If the username is too short, too long or contains
            characters other than letters, digits, underscores and hyphens.
    """
    normalized = (value or '').strip().lower()

    if len(normalized) < USERNAME_MIN_LENGTH:
        raise ValidationError(f"Username must be at least {USERNAME_MIN_LENGTH} characters")

    if len(normalized) > USERNAME_MAX_LENGTH:
        raise ValidationError(f"Username must not exceed {USERNAME_MAX_LENGTH} characters")

    if not USERNAME_PATTERN.match(normalized):
        raise ValidationError(
            "Username can only contain letters, numbers, underscores and hyphens"
        )

    return normalized
