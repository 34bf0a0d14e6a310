"""Match search snippets to medication pairs."""

from collections.abc import Sequence

from ..constants import DESCRIPTION_MAX_CHARS
from ..utils.logging import logger
from .models import InteractionFinding
from .severity import classify


def find_evidence(pair: tuple[str, str], snippets: Sequence[str]) -> str | None:
    """Return the first snippet mentioning either medication of the pair."""
    med_a, med_b = pair[0].lower(), pair[1].lower()
    for snippet in snippets:
        lower = snippet.lower()
        # Plain substring match, "aspirin" also hits "aspirin-free"
        if med_a in lower or med_b in lower:
            return snippet
    return None


def match(
    pairs: Sequence[tuple[str, str]], snippets: Sequence[str]
) -> list[InteractionFinding]:
    """Build one finding per pair that has supporting evidence.

    Pairs without a matching snippet are left out of the result.
    """
    findings = []
    for med_a, med_b in pairs:
        evidence = find_evidence((med_a, med_b), snippets)
        if evidence is None:
            logger.debug(f"No evidence for {med_a} + {med_b}")
            continue

        findings.append(
            InteractionFinding(
                pair=f"{med_a} + {med_b}",
                description=evidence[:DESCRIPTION_MAX_CHARS],
                severity=classify(evidence),
            )
        )

    logger.info(f"Matched evidence for {len(findings)} of {len(pairs)} pairs")
    return findings
