# SPDX-License-Identifier: MIT
"""
Tests for confidence scoring.
"""
import pytest

from leaksniff.risk.score import score_confidence


class TestConfidenceScoring:
    """Exact values of the confidence formula."""

    def test_base_by_severity(self):
        assert score_confidence("high", 0.0, "", "src/app.py") == 90
        assert score_confidence("med", 0.0, "", "src/app.py") == 70
        assert score_confidence("low", 0.0, "", "src/app.py") == 40

    def test_entropy_bonus_is_floored_and_capped(self):
        assert score_confidence("low", 3.6, "", "src/app.py") == 47
        assert score_confidence("low", 4.99, "", "src/app.py") == 49
        assert score_confidence("low", 8.0, "", "src/app.py") == 50

    def test_positive_context(self):
        assert score_confidence("low", 0.0, "Authorization: Bearer x", "a.py") == 50

    def test_negative_context(self):
        assert score_confidence("low", 0.0, "an EXAMPLE value", "a.py") == 20

    def test_positive_and_negative_context_add_up(self):
        assert score_confidence("low", 0.0, "dummy token", "a.py") == 30

    def test_path_penalty_is_case_insensitive(self):
        assert score_confidence("med", 0.0, "", "tests/app.py") == 50
        assert score_confidence("med", 0.0, "", "src/Mocks/app.py") == 50
        assert score_confidence("med", 0.0, "", "Fixtures/keys.json") == 50

    def test_boost(self):
        assert score_confidence("med", 0.0, "", "a.py", boost=5) == 75

    @pytest.mark.parametrize(
        "severity,entropy,context,path,boost",
        [
            ("high", 10.0, "secret token", "src/app.py", 50),
            ("low", 0.0, "mock example", "fixtures/test.py", -100),
            ("med", 6.0, "", "", 0),
        ],
    )
    def test_always_clamped(self, severity, entropy, context, path, boost):
        score = score_confidence(severity, entropy, context, path, boost)
        assert 0 <= score <= 100

    def test_clamp_edges(self):
        assert score_confidence("high", 10.0, "secret", "src/app.py", boost=50) == 100
        assert score_confidence("low", 0.0, "mock", "test/x.py", boost=-100) == 0
