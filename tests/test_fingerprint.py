from itertools import permutations

from src.interactions.fingerprint import fingerprint


class TestFingerprint:
    """Tests for the medication-set cache key."""

    def test_sorted_lowercase_joined(self):
        """Test names are lower-cased, sorted and joined with a pipe."""
        assert fingerprint(["Metformin", "Aspirin"]) == "aspirin|metformin"

    def test_order_independent(self):
        """Test every permutation yields the same key."""
        names = ["Aspirin", "Warfarin", "Lisinopril", "Metformin"]
        keys = {fingerprint(list(p)) for p in permutations(names)}
        assert keys == {"aspirin|lisinopril|metformin|warfarin"}

    def test_case_independent(self):
        """Test case variants of the same names give one key."""
        assert fingerprint(["ASPIRIN", "ibuprofen"]) == fingerprint(
            ["aspirin", "IbuProfen"]
        )

    def test_duplicates_are_kept(self):
        """Test duplicate names pass through without dedup."""
        assert fingerprint(["Aspirin", "aspirin"]) == "aspirin|aspirin"
        assert fingerprint(["Aspirin", "aspirin"]) != fingerprint(["Aspirin"])

    def test_whitespace_not_trimmed(self):
        """Test surrounding whitespace stays part of the key."""
        assert fingerprint([" Aspirin", "Ibuprofen"]) != fingerprint(
            ["Aspirin", "Ibuprofen"]
        )

    def test_empty_input(self):
        """Test an empty list yields an empty key."""
        assert fingerprint([]) == ""
