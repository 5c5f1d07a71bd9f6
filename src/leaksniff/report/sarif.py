from __future__ import annotations

import os
from typing import Any, Dict

from leaksniff.detectors.rules import RULES


def _level(severity: str) -> str:
    return "error" if severity == "high" else "warning"


def build_sarif(report: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a JSON report (see :func:`to_json_report`) into SARIF 2.1.0."""
    findings = report.get("findings", []) or []
    rule_types = {rule.id: rule.type for rule in RULES}

    # Collect rules by 'ruleId'
    rule_ids = {}
    rules = []
    for f in findings:
        rid = f.get("ruleId", "UNKNOWN")
        if rid not in rule_ids:
            rule_ids[rid] = len(rules)
            kind = f.get("type") or rule_types.get(rid, rid)
            rules.append(
                {
                    "id": rid,
                    "name": kind,
                    "shortDescription": {"text": f"Hardcoded {kind}"},
                    "defaultConfiguration": {"level": _level(f.get("severity", "low"))},
                }
            )

    results = []
    for f in findings:
        rid = f.get("ruleId", "UNKNOWN")
        results.append(
            {
                "ruleId": rid,
                "ruleIndex": rule_ids[rid],
                "level": _level(f.get("severity", "low")),
                "message": {"text": f"{f.get('type', rid)} detected: {f.get('matchPreview', '')}"},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": f.get("file", "")},
                            "region": {
                                "startLine": max(1, int(f.get("line") or 1)),
                                "startColumn": max(1, int(f.get("column") or 1)),
                            },
                        }
                    }
                ],
                "partialFingerprints": {"secretHash": f.get("hash", "")},
                "properties": {
                    "severity": f.get("severity"),
                    "confidence": f.get("confidence"),
                },
            }
        )

    # Make this upload unique per job by setting automationDetails.id
    auto_id = "leaksniff-{run}-{job}-{attempt}".format(
        run=os.getenv("GITHUB_RUN_ID", "local"),
        job=os.getenv("GITHUB_JOB", "job"),
        attempt=os.getenv("GITHUB_RUN_ATTEMPT", "1"),
    )

    return {
        "version": "2.1.0",
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "runs": [
            {
                "automationDetails": {"id": auto_id},
                "tool": {
                    "driver": {
                        "name": report.get("tool", "leaksniff"),
                        "version": report.get("version", ""),
                        "rules": rules,
                    }
                },
                "results": results,
            }
        ],
    }
