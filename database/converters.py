"""Conversion between the persisted JSON payload and RoundRecord models.

The payload is a single JSON array of round objects using the camelCase
keys id, date, score, courseRating, slope and differential.
"""

import json
from typing import Iterable, List

from models import RoundRecord
from validation.records import DecodedRound, validate_round
from database.exceptions import CorruptDataError


# ================================================================
# Payload -> Models (reads)
# ================================================================

def decode_payload(payload: str) -> List[DecodedRound]:
    """Parse the stored text and decode each entry independently.

    Raises CorruptDataError when the text is not JSON or not an array.
    Individual bad entries are returned as corrupt results, not raised.
    """
    try:
        parsed = json.loads(payload)
    except json.JSONDecodeError as e:
        raise CorruptDataError(f"Stored rounds are not valid JSON: {e}") from e
    if not isinstance(parsed, list):
        raise CorruptDataError(
            f"Stored rounds must be a JSON array, got {type(parsed).__name__}"
        )
    return [validate_round(entry) for entry in parsed]


# ================================================================
# Models -> Payload (writes)
# ================================================================

def encode_rounds(rounds: Iterable[RoundRecord]) -> str:
    """Serialize the full collection as one JSON array."""
    return json.dumps([r.to_storage() for r in rounds], ensure_ascii=False)
