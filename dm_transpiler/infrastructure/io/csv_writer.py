from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import DatasetWriteError

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd


class CSVWriter:
    pass

    def write(self, dataframe: pd.DataFrame, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            dataframe.to_csv(output_path, index=False, na_rep="")
        except OSError as exc:
            raise DatasetWriteError(f"Failed to write CSV file {output_path}: {exc}") from exc
        return output_path
