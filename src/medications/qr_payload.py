"""Emergency QR payload encoding and validation."""

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from ..constants import QR_PAYLOAD_TYPE, QR_PAYLOAD_VERSION
from ..interactions.models import Medication


def build_qr_payload(medications: Sequence[Medication]) -> dict[str, Any]:
    """Build the payload encoded into the emergency QR code.

    Internal ids are left out; responders only see name, dosage and
    instructions.
    """
    return {
        "type": QR_PAYLOAD_TYPE,
        "version": QR_PAYLOAD_VERSION,
        "generated": datetime.now(timezone.utc).isoformat(),
        "medications": [
            {
                "name": med.name,
                "dosage": med.dosage,
                "instructions": med.instructions or "",
            }
            for med in medications
        ],
    }


def parse_qr_payload(raw: str) -> dict[str, Any] | None:
    """Decode scanned QR text, returning None unless it is a Kaathu payload."""
    try:
        data = json.loads(raw)
    except (TypeError, json.JSONDecodeError):
        return None

    if not isinstance(data, dict) or data.get("type") != QR_PAYLOAD_TYPE:
        return None
    return data
