from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.diagnostics import Diagnostic


class NullLogger(LoggerPort):
    """Logger that discards everything; used by tests and library callers."""

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_run_start(
        self,
        study_id: str,
        demographics_file: Path,
        exposure_file: Path,
        output_formats: list[str],
    ) -> None:
        return None

    @override
    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None:
        return None

    @override
    def log_dataset_built(
        self, domain_code: str, row_count: int, column_count: int
    ) -> None:
        return None

    @override
    def log_diagnostic(self, diagnostic: Diagnostic) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
