# SPDX-License-Identifier: MIT
"""
Statistical and contextual signals used to rank findings.
"""

from .entropy import shannon_entropy
from .score import score_confidence

__all__ = ["shannon_entropy", "score_confidence"]
