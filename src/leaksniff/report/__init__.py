"""Console, JSON and SARIF rendering of scan results."""

from .console import format_console_table, print_console_table
from .json_report import ScanSummary, to_json_report
from .sarif import build_sarif

__all__ = [
    "ScanSummary",
    "build_sarif",
    "format_console_table",
    "print_console_table",
    "to_json_report",
]
