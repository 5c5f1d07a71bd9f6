from __future__ import annotations

import os
import re
from typing import List, Optional, Pattern, Sequence, Tuple

from leaksniff.core.findings import Finding
from leaksniff.core.redaction import hash_secret, mask_in_context, mask_secret
from leaksniff.detectors.rules import (
    JWT_ELEVATION_BOOST,
    JWT_ELEVATION_MARKERS,
    RULES,
    Rule,
)
from leaksniff.risk.entropy import shannon_entropy
from leaksniff.risk.score import score_confidence

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def normalize_path(file_path: str) -> str:
    """Forward-slash form of *file_path*, whatever the host separator."""
    return file_path.replace(os.sep, "/")


def _secret_from_match(match: "re.Match[str]", rule: Rule) -> Tuple[str, int]:
    """Return the secret substring and its offset inside the whole match."""
    if rule.secret_group:
        secret = match.group(rule.secret_group)
        if secret:
            offset = match.group(0).find(secret)
            return secret, max(offset, 0)
    return match.group(0), 0


def _is_suppressed(secret: str, line: str, ignore_patterns: Sequence[Pattern[str]]) -> bool:
    return any(rx.search(secret) or rx.search(line) for rx in ignore_patterns)


def detect_secrets_in_text(
    text: str,
    file_path: str,
    entropy_threshold: float,
    ignore_patterns: Optional[Sequence[Pattern[str]]] = None,
    rules: Sequence[Rule] = RULES,
) -> List[Finding]:
    """
    Apply every rule to every line of *text*.

    Matches of one rule on a line never overlap, but different rules are
    applied independently, so the same substring can yield several findings.

    Args:
        text: Decoded file content
        file_path: Path used for the finding and for the path-based penalty
        entropy_threshold: Minimum entropy for rules that require it
        ignore_patterns: Compiled suppression expressions, tested against the
            secret and the whole line
        rules: Rule catalog to apply

    Returns:
        Findings in line order, then rule order, then match order
    """
    ignore_patterns = ignore_patterns or ()
    findings: List[Finding] = []
    normalized_path = normalize_path(file_path)

    for line_no, line in enumerate(_LINE_SPLIT_RE.split(text), start=1):
        for rule in rules:
            for match in rule.pattern.finditer(line):
                secret, offset = _secret_from_match(match, rule)
                if not secret:
                    continue
                if _is_suppressed(secret, line, ignore_patterns):
                    continue

                entropy = shannon_entropy(secret)
                if rule.require_entropy and entropy < entropy_threshold:
                    continue

                severity = rule.severity
                boost = rule.confidence_boost
                if rule.is_jwt:
                    lower = line.lower()
                    if any(marker in lower for marker in JWT_ELEVATION_MARKERS):
                        severity = "high"
                        boost += JWT_ELEVATION_BOOST

                masked = mask_secret(secret)
                findings.append(
                    Finding(
                        severity=severity,
                        type=rule.type,
                        file=normalized_path,
                        line=line_no,
                        column=match.start() + offset + 1,
                        match_preview=masked,
                        hash=hash_secret(secret),
                        context=mask_in_context(line, secret, masked),
                        rule_id=rule.id,
                        confidence=score_confidence(severity, entropy, line, file_path, boost),
                    )
                )

    return findings
