"""Strict decoding of persisted round entries."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional

from models import RoundRecord


class DecodeStatus(str, Enum):
    OK = "ok"
    CORRUPT = "corrupt"


class DecodedRound(BaseModel):
    """Tagged outcome of decoding one stored entry."""
    model_config = ConfigDict(frozen=True)

    status: DecodeStatus
    record: Optional[RoundRecord] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.OK


def validate_round(raw: Any) -> DecodedRound:
    """Check a reloaded entry has all six fields with the right JSON types.

    Nothing is coerced or repaired: a string score or a missing differential
    makes the whole entry corrupt.
    """
    if not isinstance(raw, dict):
        return DecodedRound(
            status=DecodeStatus.CORRUPT,
            reason=f"expected an object, got {type(raw).__name__}",
        )
    try:
        record = RoundRecord.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "entry"
        return DecodedRound(status=DecodeStatus.CORRUPT, reason=f"{location}: {first['msg']}")
    return DecodedRound(status=DecodeStatus.OK, record=record)
