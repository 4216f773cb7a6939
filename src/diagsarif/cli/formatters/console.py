# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console summary of diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from diagsarif.core.constants import Severity
from diagsarif.models.diagnostic import Diagnostic
from diagsarif.sarif.builder import group_by_compiler

console = Console()

SEVERITY_COLORS = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.HINT: "cyan",
    Severity.INFORMATION: "dim",
}


def build_summary_table(diagnostics: Sequence[Diagnostic]) -> Table:
    """Tabulate diagnostic counts per producing tool and severity."""
    table = Table(title="Diagnostics", show_footer=True)
    table.add_column("Tool", footer="Total")
    for severity in Severity:
        total = sum(1 for d in diagnostics if d.severity == severity)
        table.add_column(
            severity.value.capitalize(),
            footer=str(total),
            justify="right",
            style=SEVERITY_COLORS[severity],
        )

    for name, members in group_by_compiler(diagnostics):
        counts = [sum(1 for d in members if d.severity == s) for s in Severity]
        table.add_row(name, *(str(c) for c in counts))
    return table


def format_summary(diagnostics: Sequence[Diagnostic]) -> None:
    """Print a diagnostics summary to the console."""
    if not diagnostics:
        console.print("[bold green]No diagnostics.[/bold green]")
        return
    console.print(build_summary_table(diagnostics))
