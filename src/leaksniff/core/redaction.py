# SPDX-License-Identifier: MIT
"""
Central redaction utilities for leaksniff.

This module provides consistent masking across findings, console and JSON
output. No helper here ever returns the raw secret; the only stable
identifier of a secret is its SHA-256 digest.
"""

from __future__ import annotations
import hashlib
from typing import Dict, Any, List

MASK = "****"
REDACTED = "REDACTED"


def mask_secret(secret: str) -> str:
    """
    Mask a secret showing only its last 4 characters.

    An empty secret maps to the bare mask.

    Args:
        secret: The secret string to mask

    Returns:
        Masked string, e.g. ``****CDEF``
    """
    if not secret:
        return MASK
    return MASK + secret[-4:]


def mask_in_context(line: str, secret: str, masked: str) -> str:
    """Replace every literal occurrence of *secret* in *line* with *masked*."""
    if not secret:
        return line
    return line.replace(secret, masked)


def hash_secret(secret: str) -> str:
    """Stable digest of a raw secret, prefixed with the algorithm name."""
    digest = hashlib.sha256(secret.encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def redact_finding(finding: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fully redact the human-readable fields of a finding dictionary.

    Args:
        finding: Finding dictionary in report shape

    Returns:
        Copy with ``matchPreview`` and ``context`` replaced by ``REDACTED``
    """
    redacted_finding = finding.copy()
    redacted_finding["matchPreview"] = REDACTED
    redacted_finding["context"] = REDACTED
    return redacted_finding


def redact_findings_list(findings: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [redact_finding(finding) for finding in findings]
