"""Input validators for the round entry form.

Each validator takes the raw field value (usually a string straight from the
form) and returns a FieldResult. Expected bad input never raises.
"""

from __future__ import annotations

import math
import re
from datetime import date
from typing import Any, Dict, Optional

from .result import ErrorKind, FieldResult

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

SCORE_RANGE = (1, 200)
COURSE_RATING_RANGE = (50.0, 80.0)
SLOPE_RANGE = (55, 155)


class _NotANumber(Exception):
    pass


def _parse_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise _NotANumber
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        raise _NotANumber
    if not math.isfinite(number):
        raise _NotANumber
    return number


def _validate_integer(value: Any, label: str, bounds) -> FieldResult:
    if value is None or (isinstance(value, str) and not value.strip()):
        return FieldResult.failure(ErrorKind.MISSING, f"Please enter the {label}.")
    try:
        number = _parse_number(value)
    except _NotANumber:
        return FieldResult.failure(ErrorKind.TYPE, f"{label.capitalize()} must be a number.")
    if not number.is_integer():
        return FieldResult.failure(ErrorKind.TYPE, f"{label.capitalize()} must be a whole number.")

    low, high = bounds
    parsed = int(number)
    if not low <= parsed <= high:
        return FieldResult.failure(
            ErrorKind.RANGE, f"{label.capitalize()} must be between {low} and {high}."
        )
    return FieldResult.success(parsed)


def validate_date(value: Any, today: Optional[date] = None) -> FieldResult:
    """Accept a YYYY-MM-DD calendar date that is not after today."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return FieldResult.failure(ErrorKind.MISSING, "Please enter a date.")
    if not isinstance(value, str):
        return FieldResult.failure(ErrorKind.TYPE, "Date must be text in the form YYYY-MM-DD.")

    text = value.strip()
    if not DATE_PATTERN.match(text):
        return FieldResult.failure(ErrorKind.FORMAT, "Date must be in the form YYYY-MM-DD.")
    try:
        played = date.fromisoformat(text)
    except ValueError:
        return FieldResult.failure(ErrorKind.FORMAT, f"{text} is not a valid calendar date.")

    if played > (today or date.today()):
        return FieldResult.failure(ErrorKind.RANGE, "Date cannot be in the future.")
    return FieldResult.success(text)


def validate_score(value: Any) -> FieldResult:
    """Gross score: whole number in [1, 200]."""
    return _validate_integer(value, "gross score", SCORE_RANGE)


def validate_course_rating(value: Any) -> FieldResult:
    """Course rating: real number in [50, 80]."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return FieldResult.failure(ErrorKind.MISSING, "Please enter the course rating.")
    try:
        rating = _parse_number(value)
    except _NotANumber:
        return FieldResult.failure(ErrorKind.TYPE, "Course rating must be a number.")

    low, high = COURSE_RATING_RANGE
    if not low <= rating <= high:
        return FieldResult.failure(
            ErrorKind.RANGE, f"Course rating must be between {low:g} and {high:g}."
        )
    return FieldResult.success(rating)


def validate_slope(value: Any) -> FieldResult:
    """Slope rating: whole number in [55, 155]."""
    return _validate_integer(value, "slope rating", SLOPE_RANGE)


def validate_round_input(
    date_value: Any,
    score: Any,
    course_rating: Any,
    slope: Any,
    today: Optional[date] = None,
) -> FieldResult:
    """Validate a whole entry form, stopping at the first failing field.

    On success the value is a dict with keys date, score, course_rating, slope.
    """
    checks = (
        ("date", lambda: validate_date(date_value, today)),
        ("score", lambda: validate_score(score)),
        ("course_rating", lambda: validate_course_rating(course_rating)),
        ("slope", lambda: validate_slope(slope)),
    )
    values: Dict[str, Any] = {}
    for name, check in checks:
        result = check()
        if not result.ok:
            return result
        values[name] = result.value
    return FieldResult.success(values)
