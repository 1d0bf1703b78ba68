"""
Field rules for candidate users.
"""

from typing import Optional

from users_api.core import errors

MIN_AGE = 1
MAX_AGE = 150


def validate_user(name: str, age: int) -> Optional[str]:
    """
    Check a candidate user against the name and age rules.

    Rules are applied in order and the first failure wins.

    Args:
        name: Candidate display name
        age: Candidate age in years

    Returns:
        None when the candidate is valid, otherwise the rejection message
    """
    if not name or name.isspace():
        return errors.EMPTY_NAME

    if name.isdecimal():
        return errors.NUMERIC_NAME

    if age < MIN_AGE or age > MAX_AGE:
        return errors.AGE_OUT_OF_RANGE

    return None
