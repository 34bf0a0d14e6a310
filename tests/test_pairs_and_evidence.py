import pytest
from pydantic import ValidationError

from src.interactions.evidence import find_evidence, match
from src.interactions.models import InteractionFinding, Severity
from src.interactions.pairs import generate_pairs


class TestGeneratePairs:
    """Tests for unordered pair enumeration."""

    def test_three_names(self):
        """Test 3 names give 3 pairs in input order."""
        assert generate_pairs(["A", "B", "C"]) == [("A", "B"), ("A", "C"), ("B", "C")]

    def test_two_names(self):
        """Test exactly one pair for 2 names."""
        assert generate_pairs(["aspirin", "warfarin"]) == [("aspirin", "warfarin")]

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    def test_pair_count(self, n):
        """Test n names give n(n-1)/2 pairs."""
        names = [f"drug{i}" for i in range(n)]
        assert len(generate_pairs(names)) == n * (n - 1) // 2

    def test_preserves_member_order(self):
        """Test the earlier name always comes first in its pair."""
        names = ["Warfarin", "Aspirin", "Lisinopril"]
        for med_a, med_b in generate_pairs(names):
            assert names.index(med_a) < names.index(med_b)


class TestMatch:
    """Tests for evidence matching over search snippets."""

    def test_single_matching_snippet(self):
        """Test a matching snippet yields one classified finding."""
        snippets = ["Aspirin and Ibuprofen have a moderate interaction. Use caution."]

        findings = match([("Aspirin", "Ibuprofen")], snippets)

        assert len(findings) == 1
        assert findings[0].pair == "Aspirin + Ibuprofen"
        assert findings[0].severity == Severity.MODERATE
        assert findings[0].description == snippets[0]

    def test_unrelated_snippet_dropped(self):
        """Test pairs without evidence are omitted."""
        snippets = ["Unrelated health article about vitamins."]

        assert match([("Aspirin", "Ibuprofen")], snippets) == []

    def test_either_name_matches(self):
        """Test a snippet naming only one member still counts as evidence."""
        findings = match([("Aspirin", "Zinc")], ["aspirin can be fatal in overdose"])

        assert len(findings) == 1
        assert findings[0].severity == Severity.SEVERE

    def test_first_matching_snippet_wins(self):
        """Test the earliest matching snippet is the evidence."""
        snippets = [
            "Vitamin D overview",
            "Warfarin requires caution with NSAIDs",
            "Warfarin plus aspirin is dangerous",
        ]

        findings = match([("Warfarin", "Aspirin")], snippets)

        assert findings[0].description == snippets[1]
        assert findings[0].severity == Severity.MODERATE

    def test_description_truncated(self):
        """Test descriptions are capped at 300 characters."""
        snippet = "Aspirin " + "x" * 500

        findings = match([("Aspirin", "Ibuprofen")], [snippet])

        assert findings[0].description == snippet[:300]
        assert len(findings[0].description) == 300

    def test_severity_uses_full_snippet(self):
        """Test classification sees text past the truncation point."""
        snippet = "Aspirin " + "x" * 400 + " contraindicated"

        findings = match([("Aspirin", "Ibuprofen")], [snippet])

        assert findings[0].severity == Severity.SEVERE

    def test_output_follows_pair_order(self):
        """Test findings come back in pair order, skipping unmatched pairs."""
        pairs = generate_pairs(["Aspirin", "Ibuprofen", "Zinc", "Iron"])
        snippets = ["Zinc and iron compete for absorption"]

        findings = match(pairs, snippets)

        assert [f.pair for f in findings] == [
            "Aspirin + Zinc",
            "Aspirin + Iron",
            "Ibuprofen + Zinc",
            "Ibuprofen + Iron",
            "Zinc + Iron",
        ]

    def test_no_snippets(self):
        """Test three names with no snippets give no findings."""
        assert match(generate_pairs(["A", "B", "C"]), []) == []

    def test_find_evidence_case_insensitive(self):
        """Test name matching ignores case."""
        assert find_evidence(("ASPIRIN", "x"), ["low-dose aspirin"]) == "low-dose aspirin"
        assert find_evidence(("aspirin", "x"), ["nothing here"]) is None


class TestInteractionFinding:
    """Tests for the finding model."""

    def test_is_immutable(self):
        """Test findings cannot be modified after creation."""
        finding = InteractionFinding(pair="A + B", description="d", severity="Mild")

        with pytest.raises(ValidationError):
            finding.description = "changed"

    def test_rejects_long_description(self):
        """Test descriptions longer than 300 characters are invalid."""
        with pytest.raises(ValidationError):
            InteractionFinding(pair="A + B", description="x" * 301, severity="Mild")
