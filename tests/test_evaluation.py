"""
Tests for the offline evaluation harness.
"""
import pytest

from evaluation.cases import EVAL_CASES
from evaluation.metrics import calculate_metrics
from evaluation.runner import run_evaluation
from troubleshoot_kb import TroubleshootApp, TroubleshootConfig


@pytest.fixture(scope="module")
def results(kb_path):
    app = TroubleshootApp(TroubleshootConfig(kb_path=kb_path, log_unknown_queries=False))
    app.initialize()
    return run_evaluation(app, EVAL_CASES)


def test_results_shape(results):
    assert len(results) == len(EVAL_CASES)
    for r in results:
        assert {"id", "question", "refused", "confidence", "error", "strategy", "latency_ms"} <= set(r)


def test_out_of_domain_refused(results):
    refused = {r["id"]: r["refused"] for r in results}
    assert refused["out_of_domain"] is True


def test_error_code_cases(results):
    by_id = {r["id"]: r for r in results}
    assert by_id["http_404_code"]["error"] == "404 Not Found"
    assert by_id["http_404_code"]["strategy"] == "error_code"


def test_metrics_on_known_results():
    cases = [
        {"id": "a", "should_refuse": False, "expected_error": "Forgot Password"},
        {"id": "b", "should_refuse": False, "expected_error": "VPN Connection Fails"},
        {"id": "c", "should_refuse": True, "expected_error": None},
    ]
    results = [
        {"id": "a", "refused": False, "error": "Forgot Password", "confidence": 0.9},
        {"id": "b", "refused": False, "error": "Forgot Password", "confidence": 0.8},
        {"id": "c", "refused": True, "error": None, "confidence": 0.0},
    ]

    metrics = calculate_metrics(results, cases)

    assert metrics == {
        "match_accuracy": 0.5,
        "refusal_accuracy": 1.0,
        "overconfidence_count": 1,
        "total_cases": 3,
    }
