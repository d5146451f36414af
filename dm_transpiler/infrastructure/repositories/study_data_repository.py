from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyreadstat  # type: ignore[import-untyped]

from ..io.csv_reader import CSVReader, CSVReadOptions
from ..io.exceptions import DataParseError, DataSourceNotFoundError

SUPPORTED_EXTENSIONS = (".csv", ".tsv", ".txt", ".xls", ".xlsx", ".sas7bdat")


class StudyDataRepository:
    pass

    def __init__(self, csv_reader: CSVReader | None = None) -> None:
        super().__init__()
        self._csv_reader = csv_reader or CSVReader()

    def read_dataset(self, file_path: str | Path) -> pd.DataFrame:
        path = Path(file_path)
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        ext = path.suffix.lower()
        if ext in (".csv", ".tsv", ".txt"):
            return self._read_csv(path)
        if ext in (".xls", ".xlsx"):
            return self._read_excel(path)
        if ext == ".sas7bdat":
            return self._read_sas(path)
        supported = ", ".join(SUPPORTED_EXTENSIONS)
        raise DataParseError(f"Unsupported format '{ext}'. Supported: {supported}")

    def _read_csv(self, path: Path) -> pd.DataFrame:
        options = CSVReadOptions(normalize_headers=True, strict_na_handling=True)
        return self._csv_reader.read(path, options)

    def _read_excel(self, path: Path) -> pd.DataFrame:
        try:
            return pd.read_excel(path, dtype=str)
        except Exception as e:
            raise DataParseError(f"Failed to read Excel file {path}: {e}") from e

    def _read_sas(self, path: Path) -> pd.DataFrame:
        try:
            frame, _meta = pyreadstat.read_sas7bdat(str(path))
            return frame
        except Exception as e:
            raise DataParseError(f"Failed to read SAS file {path}: {e}") from e
