from datetime import date as date_type
from pydantic import Field, field_validator
from typing import Any

from .base import BaseGolfModel


class RoundRecord(BaseGolfModel):
    """A single played round as it is stored. Immutable once created."""
    id: str = Field(min_length=1)
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    score: int = Field(ge=1, le=200)
    course_rating: float = Field(alias="courseRating", ge=50, le=80, allow_inf_nan=False)
    slope: int = Field(ge=55, le=155)
    differential: float = Field(allow_inf_nan=False)  # stored as computed at creation, never recomputed

    @field_validator('score', 'course_rating', 'slope', 'differential', mode='before')
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        # bool is an int subclass; JSON true/false is never a number here
        if isinstance(v, bool):
            raise ValueError("Boolean is not a number")
        return v

    @field_validator('date')
    @classmethod
    def validate_calendar_date(cls, v: str) -> str:
        try:
            date_type.fromisoformat(v)
        except ValueError:
            raise ValueError(f"'{v}' is not a real calendar date")
        return v

    @property
    def played_on(self) -> date_type:
        """The round date as a date object."""
        return date_type.fromisoformat(self.date)
