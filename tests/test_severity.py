import pytest

from src.interactions.models import Severity
from src.interactions.severity import classify


class TestClassify:
    """Tests for keyword-priority severity classification."""

    @pytest.mark.parametrize(
        "text",
        [
            "This is a severe interaction",
            "dangerous combination",
            "potentially fatal",
            "these drugs are contraindicated",
        ],
    )
    def test_severe_keywords(self, text):
        """Test each severe keyword maps to Severe."""
        assert classify(text) == Severity.SEVERE

    @pytest.mark.parametrize(
        "text",
        [
            "moderate risk of interaction",
            "use caution when combining",
            "monitor patient closely",
        ],
    )
    def test_moderate_keywords(self, text):
        """Test each moderate keyword maps to Moderate."""
        assert classify(text) == Severity.MODERATE

    def test_mild_default(self):
        """Test text without keywords falls back to Mild."""
        assert classify("minor interaction possible") == Severity.MILD

    def test_empty_string(self):
        """Test the empty string is Mild."""
        assert classify("") == Severity.MILD

    def test_case_insensitive(self):
        """Test matching ignores case."""
        assert classify("SEVERE DANGER") == Severity.SEVERE
        assert classify("MODERATE risk") == Severity.MODERATE

    def test_severe_takes_priority(self):
        """Test a snippet with both severe and moderate keywords is Severe."""
        assert classify("severe interaction, monitor closely") == Severity.SEVERE

    def test_substring_match(self):
        """Test keywords match inside longer words."""
        assert classify("Monitoring is advised") == Severity.MODERATE

    def test_idempotent(self):
        """Test repeated calls agree."""
        text = "Use caution with NSAIDs"
        assert classify(text) == classify(text) == Severity.MODERATE

    def test_serializes_as_label(self):
        """Test severity values are the client-facing labels."""
        assert Severity.SEVERE.value == "Severe"
        assert classify("fatal") == "Severe"
