from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...constants import ControlledValues

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rich.console import Console

    from ...application.models import DatasetOutputResult
    from ...domain.entities.diagnostics import Diagnostic
    from ...domain.entities.records import StandardizedDemographicRecord


@dataclass(frozen=True, slots=True)
class SummaryRequest:
    study_id: str
    records: Sequence[StandardizedDemographicRecord]
    diagnostics: Sequence[Diagnostic]
    output_dir: Path
    output: DatasetOutputResult | None = None
    error: str | None = None


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, request: SummaryRequest) -> None:
        self.console.print()
        self.console.print(self._build_summary_table(request))
        self.console.print()
        if request.diagnostics:
            self.console.print(self._build_diagnostics_table(request.diagnostics))
            self.console.print()
        self._print_status_summary(request)
        self._print_output_information(request)

    def _build_summary_table(self, request: SummaryRequest) -> Table:
        table = Table(
            title=f"📊 DM Summary: {request.study_id}",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
            title_style="bold magenta",
        )
        table.add_column("Arm", style="cyan", no_wrap=True)
        table.add_column("Description", style="white", overflow="fold")
        table.add_column("Subjects", justify="right", style="yellow", no_wrap=True)
        for (code, label), count in self._arm_counts(request.records):
            table.add_row(code, label, f"{count:,}")
        table.add_section()
        table.add_row(
            "[bold]Total[/bold]",
            "",
            f"[bold yellow]{len(request.records):,}[/bold yellow]",
        )
        return table

    def _build_diagnostics_table(self, diagnostics: Sequence[Diagnostic]) -> Table:
        table = Table(
            title="Diagnostics",
            show_header=True,
            header_style="bold yellow",
        )
        table.add_column("Severity", no_wrap=True)
        table.add_column("Code", style="cyan", no_wrap=True)
        table.add_column("Subject", no_wrap=True)
        table.add_column("Message", overflow="fold")
        for diagnostic in diagnostics:
            severity = (
                f"[red]{diagnostic.severity}[/red]"
                if diagnostic.is_error
                else f"[yellow]{diagnostic.severity}[/yellow]"
            )
            table.add_row(
                severity,
                str(diagnostic.code),
                escape(diagnostic.subject_id or "-"),
                escape(diagnostic.message),
            )
        return table

    @staticmethod
    def _arm_counts(
        records: Sequence[StandardizedDemographicRecord],
    ) -> list[tuple[tuple[str, str], int]]:
        counts = Counter(
            (
                record.arm_code or ControlledValues.ARM_NOT_ASSIGNED,
                record.arm or record.arm_not_assigned_reason,
            )
            for record in records
        )
        return sorted(counts.items())

    def _print_status_summary(self, request: SummaryRequest) -> None:
        errors = sum(1 for d in request.diagnostics if d.is_error)
        warnings = len(request.diagnostics) - errors
        if request.error:
            status_line = f"[bold red]✗ Failed:[/bold red] {request.error}"
        elif errors:
            status_line = (
                f"[bold yellow]⚠ {len(request.records)} record(s), "
                f"{warnings} warning(s), {errors} error(s)[/bold yellow]"
            )
        elif warnings:
            status_line = (
                f"[bold green]✓ {len(request.records)} record(s)[/bold green]"
                f" [yellow]with {warnings} warning(s)[/yellow]"
            )
        else:
            status_line = (
                f"[bold green]✓ {len(request.records)} record(s), no issues"
                "[/bold green]"
            )
        self.console.print(status_line)

    def _print_output_information(self, request: SummaryRequest) -> None:
        self.console.print(
            f"[bold]📁 Output:[/bold] [cyan]{request.output_dir}[/cyan]",
            highlight=False,
        )
        if request.output is None:
            return
        written = request.output.written_paths()
        if written:
            self.console.print("[bold]📦 Generated:[/bold]")
            for path in written:
                self.console.print(f"  • {path.name}", highlight=False)
