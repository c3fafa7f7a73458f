"""Validation rules for member signup and profile updates."""

import re
from collections.abc import Callable

LOGIN_NAME_MIN_LENGTH = 2
LOGIN_NAME_MAX_LENGTH = 25
LOGIN_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")

# Names that would collide with site URLs or staff identities
RESERVED_LOGIN_NAMES = frozenset({"growstuff", "admin", "moderator", "staff", "nearby"})

LENGTH_MESSAGE = "should be between 2 and 25 characters long"
CHARSET_MESSAGE = "may only include letters, numbers, or underscores"
RESERVED_MESSAGE = "name is reserved"
TAKEN_MESSAGE = "has already been taken"
TOS_MESSAGE = "must be accepted"
BLANK_MESSAGE = "can't be blank"


def validate_login_name(
    login_name: str | None,
    name_taken: Callable[[str], bool] | None = None,
) -> list[str]:
    """Check a candidate login name against every rule.

    Args:
        login_name: Name as typed by the member
        name_taken: Lookup returning True if another member already uses the
            name (compared case-insensitively). Skipped when None.

    Returns:
        Error messages for every rule the name breaks; empty if valid
    """
    if not login_name:
        return [BLANK_MESSAGE, LENGTH_MESSAGE]

    errors = []
    if not LOGIN_NAME_MIN_LENGTH <= len(login_name) <= LOGIN_NAME_MAX_LENGTH:
        errors.append(LENGTH_MESSAGE)
    if not LOGIN_NAME_PATTERN.fullmatch(login_name):
        errors.append(CHARSET_MESSAGE)
    if login_name.lower() in RESERVED_LOGIN_NAMES:
        errors.append(RESERVED_MESSAGE)
    if name_taken is not None and name_taken(login_name):
        errors.append(TAKEN_MESSAGE)
    return errors


def validate_tos_agreement(agreed: bool | None) -> list[str]:
    """Signup is only allowed once the terms of service are accepted."""
    if agreed is True:
        return []
    return [TOS_MESSAGE]


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
