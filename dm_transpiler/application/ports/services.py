from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.diagnostics import Diagnostic
    from ..models import DatasetOutputRequest, DatasetOutputResult


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_run_start(
        self,
        study_id: str,
        demographics_file: Path,
        exposure_file: Path,
        output_formats: list[str],
    ) -> None: ...

    def log_file_loaded(
        self, filename: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_dataset_built(
        self, domain_code: str, row_count: int, column_count: int
    ) -> None: ...

    def log_diagnostic(self, diagnostic: Diagnostic) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class DatasetOutputPort(Protocol):
    pass

    def generate(self, request: DatasetOutputRequest) -> DatasetOutputResult: ...
