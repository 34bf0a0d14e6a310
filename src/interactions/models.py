"""Data models shared by the interaction subsystem."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DESCRIPTION_MAX_CHARS


class Severity(str, Enum):
    """Severity taxonomy for a reported interaction."""

    SEVERE = "Severe"
    MODERATE = "Moderate"
    MILD = "Mild"


class InteractionFinding(BaseModel):
    """One medication-pair interaction backed by a search snippet."""

    model_config = ConfigDict(frozen=True)

    pair: str
    description: str = Field(max_length=DESCRIPTION_MAX_CHARS)
    severity: Severity


class CacheEntry(BaseModel):
    """Persisted result of one orchestration run."""

    fingerprint: str
    timestamp: int  # epoch milliseconds
    findings: list[InteractionFinding] = []


class Medication(BaseModel):
    """A medication recorded by the patient."""

    id: int
    name: str
    dosage: str
    instructions: str = ""
