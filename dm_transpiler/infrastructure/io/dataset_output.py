from __future__ import annotations

from typing import TYPE_CHECKING

from ...application.models import DatasetOutputResult
from .exceptions import DatasetWriteError

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

    from ...application.models import DatasetOutputRequest
    from ...domain.entities.sdtm_domain import SDTMDomain
    from .csv_writer import CSVWriter
    from .xpt_writer import XPTWriter


class DatasetOutputAdapter:
    pass

    def __init__(self, csv_writer: CSVWriter, xpt_writer: XPTWriter) -> None:
        super().__init__()
        self._csv_writer = csv_writer
        self._xpt_writer = xpt_writer

    def generate(self, request: DatasetOutputRequest) -> DatasetOutputResult:
        result = DatasetOutputResult()
        base_filename = request.base_filename or request.domain.resolved_dataset_name()
        disk_name = base_filename.lower()
        if "csv" in request.formats:
            try:
                result.csv_path = self._generate_csv(
                    request.dataframe, request.output_dir, disk_name
                )
            except (OSError, DatasetWriteError) as exc:
                result.errors.append(f"CSV generation failed: {exc}")
        if "xpt" in request.formats:
            try:
                result.xpt_path = self._generate_xpt(
                    request.dataframe, request.domain, request.output_dir, disk_name
                )
            except (OSError, ValueError, DatasetWriteError) as exc:
                result.errors.append(f"XPT generation failed: {exc}")
        return result

    def _generate_csv(
        self, dataframe: pd.DataFrame, output_dir: Path, disk_name: str
    ) -> Path:
        return self._csv_writer.write(dataframe, output_dir / f"{disk_name}.csv")

    def _generate_xpt(
        self,
        dataframe: pd.DataFrame,
        domain: SDTMDomain,
        output_dir: Path,
        disk_name: str,
    ) -> Path:
        return self._xpt_writer.write(dataframe, domain, output_dir / f"{disk_name}.xpt")
