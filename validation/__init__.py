from .fields import (
    validate_course_rating,
    validate_date,
    validate_round_input,
    validate_score,
    validate_slope,
)
from .records import DecodedRound, DecodeStatus, validate_round
from .result import ErrorKind, FieldResult

__all__ = [
    "DecodedRound",
    "DecodeStatus",
    "ErrorKind",
    "FieldResult",
    "validate_course_rating",
    "validate_date",
    "validate_round",
    "validate_round_input",
    "validate_score",
    "validate_slope",
]
