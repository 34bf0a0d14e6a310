"""Persisted medication list for one patient."""

import json

from pydantic import TypeAdapter, ValidationError

from ..constants import MEDICATIONS_STORAGE_KEY
from ..interactions.cache import InteractionCache
from ..interactions.models import Medication
from ..interactions.orchestrator import InvalidInputError
from ..utils.logging import logger
from ..utils.storage import KeyValueStore
from .qr_payload import parse_qr_payload

_medication_list = TypeAdapter(list[Medication])


class MedicationStore:
    """Medication list kept in a key-value store.

    Every edit drops the cached interaction results, so a stale fingerprint is
    never consulted.
    """

    def __init__(
        self,
        store: KeyValueStore,
        cache: InteractionCache = None,
        key: str = MEDICATIONS_STORAGE_KEY,
    ):
        """Initialize and load any previously saved medications."""
        self.backend = store
        self.cache = cache
        self.key = key
        self.medications = self._load()

    def _load(self) -> list[Medication]:
        raw = self.backend.get(self.key)
        if not raw:
            return []
        try:
            return _medication_list.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable medication list: {e}")
            return []

    def _save(self):
        payload = [med.model_dump() for med in self.medications]
        self.backend.set(self.key, json.dumps(payload))
        if self.cache is not None:
            self.cache.invalidate()

    def _next_id(self) -> int:
        return max((med.id for med in self.medications), default=0) + 1

    def add(self, name: str, dosage: str, instructions: str = "") -> Medication:
        """Record a medication; name and dosage are required."""
        if not name or not dosage:
            raise InvalidInputError("Medication name and dosage are required")

        medication = Medication(
            id=self._next_id(),
            name=name,
            dosage=dosage,
            instructions=instructions or "",
        )
        self.medications.append(medication)
        self._save()
        logger.info(f"Added medication: {name} {dosage}")
        return medication

    def remove(self, medication_id: int):
        """Remove a medication by id."""
        self.medications = [med for med in self.medications if med.id != medication_id]
        self._save()

    def clear(self):
        """Remove every medication."""
        self.medications = []
        self._save()

    def names(self) -> list[str]:
        """Return the medication names in list order."""
        return [med.name for med in self.medications]

    def import_qr(self, raw: str) -> int:
        """Add the medications from scanned QR text; returns how many were added.

        Entries without a name or dosage are skipped.
        """
        payload = parse_qr_payload(raw)
        if payload is None:
            raise InvalidInputError("Not a Kaathu QR payload")

        entries = payload.get("medications")
        if not isinstance(entries, list):
            return 0

        added = 0
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name, dosage = entry.get("name"), entry.get("dosage")
            if not (isinstance(name, str) and name and isinstance(dosage, str) and dosage):
                logger.debug(f"Skipping incomplete QR entry: {entry}")
                continue
            instructions = entry.get("instructions")
            self.add(name, dosage, instructions if isinstance(instructions, str) else "")
            added += 1
        return added
