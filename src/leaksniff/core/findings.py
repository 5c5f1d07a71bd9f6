"""Finding data structures and utilities for leaksniff."""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Any, Literal

Severity = Literal["low", "med", "high"]

SEVERITIES = ("low", "med", "high")

_SEVERITY_RANK = {"low": 1, "med": 2, "high": 3}


def severity_rank(severity: str) -> int:
    """Total order used for threshold filtering: low < med < high."""
    return _SEVERITY_RANK.get(severity, 1)


def meets_severity(severity: str, threshold: str) -> bool:
    return severity_rank(severity) >= severity_rank(threshold)


@dataclass(frozen=True)
class Finding:
    """One detected, scored and masked secret occurrence."""

    severity: Severity
    type: str  # secret family label (e.g. 'stripe_live_key')
    file: str  # forward-slash path, root-relative once the pipeline rewrites it
    line: int  # 1-based line number
    column: int  # 1-based column of the secret within the line
    match_preview: str  # masked secret, last 4 characters visible
    hash: str  # 'sha256:<hex>' digest of the raw secret
    context: str  # line with every occurrence of the secret masked
    rule_id: str
    confidence: int  # 0-100

    def with_file(self, file: str) -> "Finding":
        """Return a copy pointing at *file* (used for root-relative rewrites)."""
        return replace(self, file=file)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Finding to the JSON report shape."""
        return {
            "severity": self.severity,
            "type": self.type,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "matchPreview": self.match_preview,
            "hash": self.hash,
            "context": self.context,
            "ruleId": self.rule_id,
            "confidence": self.confidence,
        }


@dataclass
class ScanStats:
    """Counters for a single scan invocation."""

    files_scanned: int = 0
    findings: int = 0
