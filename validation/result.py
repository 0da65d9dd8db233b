"""Discriminated results returned by every validator."""

from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional


class ErrorKind(str, Enum):
    MISSING = "missing"
    FORMAT = "format"
    RANGE = "range"
    TYPE = "type"


class FieldResult(BaseModel):
    """Either a normalized value or one user-facing error message."""
    model_config = ConfigDict(frozen=True)

    value: Any = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: Any) -> "FieldResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "FieldResult":
        return cls(error=message, kind=kind)
