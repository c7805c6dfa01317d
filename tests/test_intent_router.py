"""
Tests for deterministic intent detection.
"""
import pytest

from troubleshoot_kb.interaction import IntentRouter, IssueIntent


class TestIntentRouter:
    """Test IntentRouter.detect."""

    @pytest.fixture
    def router(self):
        return IntentRouter()

    def test_network_and_error(self, router):
        """Test that a query can carry more than one intent."""
        intents = router.detect("wi fi not working wireless network internet connection")

        assert intents == [IssueIntent.NETWORK_ISSUE, IssueIntent.ERROR_RESOLUTION]

    def test_order_follows_rule_table(self, router):
        assert router.detect("printer slow") == [
            IssueIntent.PERFORMANCE_ISSUE,
            IssueIntent.PRINTING_ISSUE,
        ]

    @pytest.mark.parametrize("query,intent", [
        ("outlook will not opening", IssueIntent.EMAIL_ISSUE),
        ("no sound from speaker", IssueIntent.AUDIO_ISSUE),
        ("app crash", IssueIntent.ERROR_RESOLUTION),
        ("INTERNET DOWN", IssueIntent.NETWORK_ISSUE),
    ])
    def test_single_intent(self, router, query, intent):
        assert intent in router.detect(query)

    @pytest.mark.parametrize("query", ["hello", "", None])
    def test_general_fallback(self, router, query):
        assert router.detect(query) == [IssueIntent.GENERAL_TROUBLESHOOTING]

    def test_intent_values(self):
        assert IssueIntent.NETWORK_ISSUE.value == "network_issue"
        assert IssueIntent.GENERAL_TROUBLESHOOTING.value == "general_troubleshooting"
