"""Reshape free-text AI replies into the fixed JSON contracts used by the client."""

import json
import re
from typing import Any

from .logging import logger

JSON_BLOCK_PATTERN = re.compile(r"\{[\s\S]*\}")

NO_MEDICATION_WARNING = "Could not identify a medication name from the transcript"


def extract_json_block(text: str) -> dict[str, Any] | None:
    """Extract the JSON object embedded in a model reply.

    The block spans from the first ``{`` to the last ``}``, which also covers
    replies wrapped in markdown code fences.

    Args:
        text: Raw reply text, possibly empty

    Returns:
        The decoded object, or None when no block is found or it does not decode

    """
    if not text:
        return None

    match = JSON_BLOCK_PATTERN.search(text)
    if not match:
        return None

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning(f"Reply contained an undecodable JSON block: {e}")
        return None

    return parsed if isinstance(parsed, dict) else None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_medication_reply(text: str) -> dict[str, str]:
    """Normalize a spoken-medication reply to name, dosage and condition."""
    parsed = extract_json_block(text)
    if parsed is None:
        return {"name": "", "dosage": "", "condition": ""}

    result = {field: _text(parsed.get(field)) for field in ("name", "dosage", "condition")}
    if not result["name"].strip():
        result["_parseWarning"] = NO_MEDICATION_WARNING
    return result


def parse_prescription_reply(text: str) -> list[dict[str, Any]]:
    """Return the medications listed in a prescription-extraction reply."""
    parsed = extract_json_block(text)
    if parsed is None:
        return []

    medications = parsed.get("medications")
    if not isinstance(medications, list):
        return []
    return [med for med in medications if isinstance(med, dict)]
