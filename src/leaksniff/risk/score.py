# SPDX-License-Identifier: MIT
"""
Confidence scoring for secret findings.

Provides deterministic confidence scoring based on:
- Base severity of the matched rule
- Shannon entropy of the extracted secret
- Keywords on the surrounding line (positive and negative)
- Path context (test/fixture/mock files)
- A per-rule boost
"""
from __future__ import annotations

import math
import re

# Base confidence by severity
BASE_CONFIDENCE = {
    "high": 90,
    "med": 70,
    "low": 40,
}

CONTEXT_KEYWORDS = (
    "secret",
    "token",
    "api key",
    "apikey",
    "bearer",
    "authorization",
    "private",
    "credential",
)

NEGATIVE_KEYWORDS = (
    "example",
    "dummy",
    "testkey",
    "test key",
    "fixture",
    "mock",
)

CONTEXT_BONUS = 10
NEGATIVE_PENALTY = -20
PATH_PENALTY = -20
MAX_ENTROPY_BONUS = 10

_TEST_PATH_RE = re.compile(r"test|fixture|mock")


def _get_entropy_bonus(entropy: float) -> int:
    return min(MAX_ENTROPY_BONUS, math.floor(entropy * 2))


def _get_context_score(context: str) -> int:
    """Positive and negative keyword signals; both can apply."""
    lower = context.lower()
    score = 0
    if any(kw in lower for kw in CONTEXT_KEYWORDS):
        score += CONTEXT_BONUS
    if any(kw in lower for kw in NEGATIVE_KEYWORDS):
        score += NEGATIVE_PENALTY
    return score


def _get_path_penalty(file_path: str) -> int:
    if _TEST_PATH_RE.search(file_path.lower()):
        return PATH_PENALTY
    return 0


def score_confidence(
    severity: str,
    entropy: float,
    context: str,
    file_path: str,
    boost: int = 0,
) -> int:
    """
    Calculate the confidence score for a finding.

    Args:
        severity: Effective severity (low, med or high)
        entropy: Shannon entropy of the extracted secret
        context: The raw line the secret was found on
        file_path: Path of the file being scanned
        boost: Extra points contributed by the rule

    Returns:
        Confidence between 0-100
    """
    base = BASE_CONFIDENCE.get(severity, BASE_CONFIDENCE["low"])
    score = (
        base
        + _get_entropy_bonus(entropy)
        + _get_context_score(context)
        + _get_path_penalty(file_path)
        + boost
    )

    # Clamp to 0-100 range
    return max(0, min(100, int(score)))
