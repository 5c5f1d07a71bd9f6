# SPDX-License-Identifier: MIT
"""
Scan configuration for leaksniff.

Raw values (CLI strings, YAML scalars) are validated and resolved into a
:class:`ScanOptions` once per scan, before any file is touched.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Pattern

import yaml

from leaksniff.core.exceptions import LeakSniffConfigError
from leaksniff.core.findings import SEVERITIES, Severity
from leaksniff.scanner.classifier import DEFAULT_MAX_FILE_SIZE
from leaksniff.scanner.ignore import DEFAULT_IGNORE_FILENAME

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".leaksniff.yml", ".leaksniff.yaml")

DEFAULT_SEVERITY = "med"

# Entropy floor applied to entropy-gated rules when no override is given
SEVERITY_ENTROPY_THRESHOLDS = {
    "high": 0.0,
    "med": 3.5,
    "low": 2.5,
}

_CONFIG_KEYS = {
    "severity",
    "entropy",
    "max_findings",
    "max_file_size",
    "ignore_file",
    "ignore_regex",
}


@dataclass
class ScanOptions:
    root: Path
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_findings: Optional[int] = None
    severity: Severity = DEFAULT_SEVERITY
    entropy_threshold: float = SEVERITY_ENTROPY_THRESHOLDS[DEFAULT_SEVERITY]
    ignore_file: Optional[Path] = None
    ignore_regexes: List[Pattern[str]] = field(default_factory=list)
    progress: bool = False


def severity_entropy_threshold(severity: str) -> float:
    return SEVERITY_ENTROPY_THRESHOLDS.get(severity, SEVERITY_ENTROPY_THRESHOLDS["low"])


def _parse_severity(value: Any) -> str:
    if value not in SEVERITIES:
        raise LeakSniffConfigError(f"Invalid severity: {value}", option="severity")
    return value


def _parse_float(value: Any, option: str, message: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise LeakSniffConfigError(message, option=option)
    if number != number:  # NaN
        raise LeakSniffConfigError(message, option=option)
    return number


def _parse_positive_int(value: Any, option: str, message: str) -> int:
    number = _parse_float(value, option, message)
    if number <= 0 or not number.is_integer():
        raise LeakSniffConfigError(message, option=option)
    return int(number)


def compile_ignore_regexes(patterns: Iterable[str]) -> List[Pattern[str]]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise LeakSniffConfigError(
                f"Invalid ignore-regex pattern: {pattern} ({e})", option="ignore_regex"
            )
    return compiled


def _resolve_ignore_file(root: Path, ignore_file: Optional[str]) -> Optional[Path]:
    if not ignore_file:
        default_ignore = root / DEFAULT_IGNORE_FILENAME
        return default_ignore if default_ignore.exists() else None
    path = Path(ignore_file)
    if not path.is_absolute():
        path = (root / path).resolve()
    return path


def resolve_scan_options(
    root: Path | str,
    severity: Any = None,
    entropy: Any = None,
    max_findings: Any = None,
    max_file_size: Any = None,
    ignore_file: Optional[str] = None,
    ignore_regex: Optional[Iterable[str]] = None,
    progress: bool = False,
) -> ScanOptions:
    """
    Validate raw option values and build :class:`ScanOptions`.

    ``None`` means "not given" for every argument.

    Raises:
        LeakSniffConfigError: On any invalid value
    """
    root_path = Path(root).resolve()
    if not root_path.exists():
        raise LeakSniffConfigError(f"Path not found: {root_path}", option="path")

    resolved_severity = _parse_severity(severity if severity is not None else DEFAULT_SEVERITY)

    if entropy is not None and str(entropy) != "":
        entropy_threshold = _parse_float(entropy, "entropy", "Invalid entropy threshold")
    else:
        entropy_threshold = severity_entropy_threshold(resolved_severity)

    resolved_max_findings = None
    if max_findings is not None and str(max_findings) != "":
        resolved_max_findings = _parse_positive_int(
            max_findings, "max_findings", "Invalid max-findings value"
        )

    resolved_max_file_size = DEFAULT_MAX_FILE_SIZE
    if max_file_size is not None and str(max_file_size) != "":
        resolved_max_file_size = _parse_positive_int(
            max_file_size, "max_file_size", "Invalid max-file-size value"
        )

    ignore_root = root_path if root_path.is_dir() else root_path.parent

    return ScanOptions(
        root=root_path,
        max_file_size=resolved_max_file_size,
        max_findings=resolved_max_findings,
        severity=resolved_severity,
        entropy_threshold=entropy_threshold,
        ignore_file=_resolve_ignore_file(ignore_root, ignore_file),
        ignore_regexes=compile_ignore_regexes(ignore_regex or []),
        progress=progress,
    )


def load_scan_config(config_path: Optional[str] = None, root: Path | str = ".") -> Dict[str, Any]:
    """
    Load the project config following the search order.

    1. An explicit ``config_path`` must exist and parse.
    2. Otherwise ``.leaksniff.yml`` / ``.leaksniff.yaml`` at the scan root.
    3. Otherwise an empty config (built-in defaults).

    Raises:
        LeakSniffConfigError: If the config file is malformed or an explicit
            config is missing
    """
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise LeakSniffConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        return _load_yaml_config(config_abs_path)

    root_path = Path(root).resolve()
    search_dir = root_path if root_path.is_dir() else root_path.parent
    for config_name in CONFIG_FILENAMES:
        config_file = search_dir / config_name
        if config_file.exists():
            return _load_yaml_config(config_file)

    logger.debug("Using default scan config")
    return {}


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LeakSniffConfigError(
            f"Failed to parse config file: {e}", config_path=str(config_path)
        )

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise LeakSniffConfigError("Config must be a mapping", config_path=str(config_path))

    unknown = sorted(set(config) - _CONFIG_KEYS)
    if unknown:
        raise LeakSniffConfigError(
            f"Unknown config keys: {', '.join(map(str, unknown))}",
            config_path=str(config_path),
        )

    ignore_regex = config.get("ignore_regex", [])
    if isinstance(ignore_regex, str):
        ignore_regex = [ignore_regex]
    if not isinstance(ignore_regex, list):
        raise LeakSniffConfigError(
            "ignore_regex must be a list of patterns", config_path=str(config_path)
        )
    config["ignore_regex"] = [str(p) for p in ignore_regex]

    logger.info(f"Loaded config: {config_path}")
    return config
