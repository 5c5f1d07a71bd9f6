from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from leaksniff.core.findings import Finding
from leaksniff.core.redaction import redact_findings_list
from leaksniff.detectors.matcher import normalize_path

TOOL_NAME = "leaksniff"


@dataclass
class ScanSummary:
    files_scanned: int
    findings: int
    duration_ms: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "filesScanned": self.files_scanned,
            "findings": self.findings,
            "durationMs": self.duration_ms,
        }


def to_json_report(
    findings: List[Finding],
    summary: ScanSummary,
    scanned_path: str,
    version: str,
    redact: bool = False,
) -> Dict[str, Any]:
    """Build the JSON document; ``redact`` blanks every preview and context."""
    finding_dicts = [f.to_dict() for f in findings]
    if redact:
        finding_dicts = redact_findings_list(finding_dicts)

    return {
        "tool": TOOL_NAME,
        "version": version,
        "scannedPath": normalize_path(str(Path(scanned_path).resolve())),
        "summary": summary.to_dict(),
        "findings": finding_dicts,
    }
