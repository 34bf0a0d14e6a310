"""Streamlit-independent pieces of the frontend: wiring, checks and markup."""

import html

from ..constants import LOCAL_STORE_PATH
from ..interactions.cache import InteractionCache
from ..interactions.models import InteractionFinding, Medication, Severity
from ..interactions.orchestrator import (
    InvalidInputError,
    UpstreamUnavailableError,
    get_interactions_safe,
)
from ..medications.store import MedicationStore
from ..utils.logging import logger
from ..utils.storage import JSONFileStore


def open_stores(path: str = LOCAL_STORE_PATH) -> tuple[MedicationStore, InteractionCache]:
    """Medication list and interaction cache sharing one JSON file."""
    store = JSONFileStore(path)
    interaction_cache = InteractionCache(store)
    return MedicationStore(store, interaction_cache), interaction_cache


async def run_interaction_check(
    medications: list[str], interaction_cache: InteractionCache
) -> tuple[list[InteractionFinding] | None, str | None]:
    """Run the interaction check.

    Returns:
        ``(findings, None)`` on success, or ``(None, message)`` with the error
        text to show the user

    """
    try:
        logger.info(f"Checking interactions for: {medications}")
        return await get_interactions_safe(medications, interaction_cache), None
    except InvalidInputError as e:
        return None, f"⚠️ {e}"
    except UpstreamUnavailableError as e:
        logger.error(f"Interaction check failed: {e}")
        return None, "❌ Failed to check drug interactions. Please try again."
    except Exception as e:
        error_msg = f"Interaction check failed: {str(e)}"
        logger.error(error_msg, exc_info=True)
        return None, f"❌ {error_msg}"


def get_severity_css_class(severity: Severity) -> str:
    """Get CSS class for a severity level."""
    severity_classes = {
        Severity.SEVERE: "risk-high",
        Severity.MODERATE: "risk-moderate",
        Severity.MILD: "risk-low",
    }
    return severity_classes.get(severity, "risk-low")


def get_severity_icon(severity: Severity) -> str:
    """Get appropriate icon for a severity level."""
    severity_icons = {
        Severity.SEVERE: "🚨",
        Severity.MODERATE: "⚠️",
        Severity.MILD: "ℹ️",
    }
    return severity_icons.get(severity, "❓")


def format_finding_header(finding: InteractionFinding) -> str:
    """Build the colored header block for one finding.

    Medication names are user input and are escaped before going into HTML.
    """
    css_class = get_severity_css_class(finding.severity)
    icon = get_severity_icon(finding.severity)
    pair = html.escape(finding.pair)
    return f"""
        <div class="{css_class}">
            <h4>{icon} {pair} - {finding.severity.value}</h4>
        </div>
        """


def format_medication_details(medication: Medication) -> str:
    """One markdown line with name, dosage and any instructions."""
    details = f"**{html.escape(medication.name)}** · {html.escape(medication.dosage)}"
    if medication.instructions:
        details += f" · {html.escape(medication.instructions)}"
    return details
