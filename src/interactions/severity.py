"""Keyword-based severity classification of interaction snippets."""

from .models import Severity

# Checked in order, first match wins
SEVERITY_RULES: list[tuple[tuple[str, ...], Severity]] = [
    (("severe", "dangerous", "fatal", "contraindicated"), Severity.SEVERE),
    (("moderate", "caution", "monitor"), Severity.MODERATE),
]
DEFAULT_SEVERITY = Severity.MILD


def classify(text: str) -> Severity:
    """Map a free-text snippet to a severity level."""
    lower = text.lower()
    for keywords, severity in SEVERITY_RULES:
        if any(keyword in lower for keyword in keywords):
            return severity
    return DEFAULT_SEVERITY
