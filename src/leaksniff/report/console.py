from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from leaksniff.core.findings import Finding

SEVERITY_STYLES = {
    "high": "red",
    "med": "yellow",
    "low": "blue",
}


def format_console_table(findings: List[Finding]) -> Table | Text:
    if not findings:
        return Text("No secrets detected.", style="green")

    table = Table(header_style="bold", show_lines=False)
    table.add_column("Severity", width=10)
    table.add_column("Type", width=20, overflow="fold")
    table.add_column("File", width=40, overflow="fold")
    table.add_column("Line", width=8, justify="right")
    table.add_column("Match", width=14, overflow="fold")
    table.add_column("Hash", width=74, overflow="fold")

    for finding in findings:
        table.add_row(
            Text(finding.severity.upper(), style=SEVERITY_STYLES.get(finding.severity, "")),
            finding.type,
            finding.file,
            str(finding.line),
            finding.match_preview,
            finding.hash,
        )
    return table


def print_console_table(findings: List[Finding], console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(format_console_table(findings))
