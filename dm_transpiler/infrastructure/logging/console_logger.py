from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING

from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.diagnostics import Diagnostic


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    study_id: str = ""
    file_name: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "files_processed": 0,
        "records_processed": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(f"{self._get_prefix()}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{self._get_prefix()}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(f"[dim cyan]{self._get_prefix()}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_run_start(
        self,
        study_id: str,
        demographics_file: Path,
        exposure_file: Path,
        output_formats: list[str],
    ) -> None:
        self.set_context(study_id=study_id)
        self.console.print(f"[bold]Building DM for study {study_id}[/bold]")
        self.verbose(f"Demographics source: {demographics_file}")
        self.verbose(f"Exposure source: {exposure_file}")
        self.verbose(f"Output formats: {', '.join(output_formats).upper()}")

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        self._stats["files_processed"] += 1
        self.set_context(file_name=filename)
        msg = f"  Loaded {row_count:,} rows from {filename}"
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_dataset_built(
        self, domain_code: str, row_count: int, column_count: int
    ) -> None:
        self._stats["records_processed"] += row_count
        self.verbose(
            f"Final {domain_code} dataset: {row_count:,} rows x {column_count} columns"
        )

    @override
    def log_diagnostic(self, diagnostic: Diagnostic) -> None:
        if diagnostic.is_error:
            self.error(escape(diagnostic.format()))
        else:
            self.warning(escape(diagnostic.format()))

    @override
    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        self.console.print()
        self.console.print("[dim]Processing Statistics:[/dim]")
        self.console.print(
            f"[dim]  Files processed: {self._stats['files_processed']}[/dim]"
        )
        self.console.print(
            f"[dim]  Total records: {self._stats['records_processed']:,}[/dim]"
        )
        if self._stats["warnings"] > 0:
            self.console.print(
                f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
            )
        if self._stats["errors"] > 0:
            self.console.print(f"[dim red]  Errors: {self._stats['errors']}[/dim red]")
        if self._context is not None and self.verbosity >= LogLevel.DEBUG:
            self.debug(f"  Elapsed: {self._context.elapsed_ms():.0f} ms")

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.study_id:
            return escape(f"[{self._context.study_id}] ")
        return ""
