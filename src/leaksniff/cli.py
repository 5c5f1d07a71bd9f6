# SPDX-License-Identifier: MIT
"""
leaksniff - Command Line Interface

This CLI provides:
- leaksniff version
- leaksniff scan <root> --format {text,json,sarif} --severity {low,med,high}

Exit codes: 0 when nothing was found, 1 when findings were reported,
2 on invalid input or configuration.

Note:
- All example strings have been sanitized to avoid triggering detectors.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from . import __version__
from .core.exceptions import LeakSniffConfigError
from .core.findings import SEVERITIES
from .logging_setup import setup_logging

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2

logger = logging.getLogger(__name__)


def _collect(value, previous=None):
    return (previous or []) + [value]


def build_parser():
    p = argparse.ArgumentParser(
        prog="leaksniff", description="leaksniff - scan a local folder for hardcoded secrets"
    )
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")

    sp = sub.add_parser("scan", help="scan a folder or a single file")
    sp.add_argument("root", nargs="?", default=".", help="path to scan")
    sp.add_argument(
        "--format",
        choices=["text", "json", "sarif"],
        default="text",
        help="output format (default: text)"
    )
    sp.add_argument("--json", action="store_true", help="shortcut for --format json")
    sp.add_argument("--out", help="write JSON report to a file")
    sp.add_argument("--sarif-out", dest="sarif_out", help="write SARIF report to a file")
    sp.add_argument(
        "--severity",
        help=f"severity threshold ({'|'.join(SEVERITIES)}, default: med)"
    )
    sp.add_argument("--entropy", help="entropy threshold override")
    sp.add_argument("--max-findings", dest="max_findings", help="stop after N findings")
    sp.add_argument("--max-file-size", dest="max_file_size", help="max file size in bytes")
    sp.add_argument("--ignore-file", dest="ignore_file", help="ignore file (gitignore-style)")
    sp.add_argument(
        "--ignore-regex",
        dest="ignore_regex",
        action="append",
        default=[],
        help="regex to suppress matches (repeatable)"
    )
    sp.add_argument("--config", help="path to a .leaksniff.yml config file")
    sp.add_argument("--progress", action="store_true", help="show progress indicator")
    sp.add_argument("--redact", action="store_true", help="fully redact values in JSON")
    sp.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    sp.add_argument(
        "--log-format",
        dest="log_format",
        choices=["text", "json"],
        default="text",
        help="log line format (default: text)"
    )
    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    p = build_parser()
    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return EXIT_CLEAN

    if args.cmd == "scan":
        return handle_scan_command(args)

    p.print_help()
    return EXIT_CLEAN


def _pick(cli_value, config, key):
    """CLI flags win over config file values."""
    return cli_value if cli_value is not None else config.get(key)


def handle_scan_command(args):
    """Handle the scan subcommand."""
    from .scanner.config import load_scan_config, resolve_scan_options
    from .scanner.pipeline import scan_path
    from .report.console import print_console_table
    from .report.json_report import ScanSummary, to_json_report
    from .report.sarif import build_sarif

    setup_logging(verbose=args.verbose, log_format=args.log_format)

    root = Path(args.root).resolve()
    if not root.exists():
        print(f"Path not found: {root}", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = load_scan_config(args.config, root)
        options = resolve_scan_options(
            root,
            severity=_pick(args.severity, config, "severity"),
            entropy=_pick(args.entropy, config, "entropy"),
            max_findings=_pick(args.max_findings, config, "max_findings"),
            max_file_size=_pick(args.max_file_size, config, "max_file_size"),
            ignore_file=_pick(args.ignore_file, config, "ignore_file"),
            ignore_regex=list(config.get("ignore_regex", [])) + list(args.ignore_regex),
            progress=args.progress,
        )
    except LeakSniffConfigError as e:
        print(f"CONFIG ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    start = time.monotonic()
    try:
        result = scan_path(options)
    except Exception as e:
        logger.debug("Scan aborted", exc_info=True)
        print(f"Error during scan: {e}", file=sys.stderr)
        return EXIT_ERROR
    duration_ms = int((time.monotonic() - start) * 1000)

    findings = result.findings
    summary = ScanSummary(
        files_scanned=result.stats.files_scanned,
        findings=len(findings),
        duration_ms=duration_ms,
    )
    report = to_json_report(findings, summary, str(root), __version__, redact=args.redact)

    output_format = "json" if args.json else args.format

    if args.out:
        Path(args.out).write_text(json.dumps(report, indent=2), encoding="utf-8")
    if args.sarif_out:
        Path(args.sarif_out).write_text(json.dumps(build_sarif(report), indent=2), encoding="utf-8")

    if output_format == "json":
        print(json.dumps(report, indent=2))
    elif output_format == "sarif":
        print(json.dumps(build_sarif(report), indent=2))
    else:
        print_console_table(findings)

    return EXIT_FINDINGS if findings else EXIT_CLEAN


if __name__ == "__main__":
    raise SystemExit(main())
