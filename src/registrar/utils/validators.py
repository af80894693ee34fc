"""Data validation helpers.

Contact checks are advisory: callers log a warning and keep the record.

Functions:
- is_valid_email(email) -> bool: exactly one '@' and at least one '.'
- is_valid_phone(phone) -> bool: 10+ chars of digits, hyphens or spaces
- letter_grade(score) -> str: numeric score (0-100) to A/B/C/D/F
- grade_points(letter) -> float: letter grade to 0.0-4.0
"""

import string

MIN_GRADE = 0.0
MAX_GRADE = 100.0

MIN_PHONE_LENGTH = 10
PHONE_EXTRA_CHARS = {"-", " "}

# Inclusive lower bounds, checked in descending order
GRADE_BOUNDARIES = [
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
]
FAILING_LETTER = "F"

GRADE_POINTS = {
    "A": 4.0,
    "B": 3.0,
    "C": 2.0,
    "D": 1.0,
    "F": 0.0,
}


def is_valid_email(email: str) -> bool:
    """Check email shape: exactly one '@' and at least one '.'.

    Args:
        email: Email address to check

    Returns:
        True if the shape is plausible, False otherwise
    """
    return email.count("@") == 1 and "." in email


def is_valid_phone(phone: str) -> bool:
    """Check phone shape: at least 10 characters, only ASCII digits, '-' or ' '."""
    if len(phone) < MIN_PHONE_LENGTH:
        return False
    return all(ch in string.digits or ch in PHONE_EXTRA_CHARS for ch in phone)


def is_valid_grade(score: float) -> bool:
    """True if score lies in [0, 100]."""
    return MIN_GRADE <= score <= MAX_GRADE


def letter_grade(score: float) -> str:
    """Convert a numeric score to its letter grade.

    Examples:
        letter_grade(90) -> "A"
        letter_grade(89.9) -> "B"
        letter_grade(59.9) -> "F"
    """
    for lower_bound, letter in GRADE_BOUNDARIES:
        if score >= lower_bound:
            return letter
    return FAILING_LETTER


def grade_points(letter: str) -> float:
    """Convert a letter grade to grade points (unknown letters give 0.0)."""
    return GRADE_POINTS.get(letter, 0.0)
