"""Order- and case-independent identity for a medication set."""

from collections.abc import Sequence

from ..constants import FINGERPRINT_DELIMITER


def fingerprint(names: Sequence[str]) -> str:
    """Build the cache key for a list of medication names.

    Names are lower-cased and sorted by code point. Whitespace is not trimmed
    and duplicates are kept, so ``["a", "a"]`` and ``["a"]`` differ.

    Args:
        names: Medication names in any order and case

    Returns:
        The joined key, or an empty string for an empty list

    """
    return FINGERPRINT_DELIMITER.join(sorted(name.lower() for name in names))
