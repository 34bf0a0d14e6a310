"""Record failed interaction lookups and alert the monitoring inbox."""

import html
from datetime import datetime, timezone
from typing import Any

import resend

from ..constants import MONITORING_EMAIL, RESEND_API_KEY, RESEND_FROM_EMAIL
from .logging import logger


def build_alert_email(medications: list[str], source: str, failed_at: str) -> dict[str, Any]:
    """Resend parameters describing one failed lookup."""
    label = " + ".join(medications)
    rows = "".join(
        f"<tr><th align='left'>{heading}</th><td>{html.escape(value)}</td></tr>"
        for heading, value in (
            ("Medications", label),
            ("Source", source),
            ("Failed at (UTC)", failed_at),
        )
    )
    return {
        "from": RESEND_FROM_EMAIL,
        "to": MONITORING_EMAIL,
        "subject": f"Kaathu Alert: {label} lookup failed",
        "html": f"<p>An interaction lookup could not be completed.</p><table>{rows}</table>",
    }


def log_failed_lookup(medications: list[str], source: str):
    """Log the failure, then email the monitoring address when one is configured.

    Delivery problems are logged and never raised.
    """
    failed_at = datetime.now(timezone.utc).isoformat()
    logger.error(f"Interaction lookup via {source} failed for {medications} at {failed_at}")

    if not all((RESEND_API_KEY, RESEND_FROM_EMAIL, MONITORING_EMAIL)):
        logger.debug("Monitoring email not configured, skipping notification")
        return

    resend.api_key = RESEND_API_KEY
    try:
        sent = resend.Emails.send(build_alert_email(medications, source, failed_at))
    except Exception as e:
        logger.error(f"Could not deliver lookup failure alert: {e}")
        return

    if sent and sent.get("id"):
        logger.info(f"Lookup failure alert sent ({sent['id']})")
    else:
        logger.warning("Resend accepted no lookup failure alert")
